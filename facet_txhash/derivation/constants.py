"""Protocol constants shared by the Facet derivation modules."""

# L1 recipient that marks a direct Facet submission
FACET_INBOX_ADDRESS = "0x00000000000000000000000000000000000FacE7"

# Sole topic of a contract-emitted Facet event
FACET_EVENT_SIGNATURE = "0x00000000000000000000000000000000000000000000000000000000000face7"

# Leading byte of Facet-encoded payloads (decimal 70)
FACET_TX_TYPE = 0x46

# Typed-transaction byte of the L2 deposit transaction
DEPOSIT_TX_TYPE = 0x7E

# L2 predeploy holding L1 attributes, including fctMintRate()
L1_BLOCK_CONTRACT = "0x4200000000000000000000000000000000000015"

# Seconds per L2 block, assumed constant for the mint-rate lookup
L2_BLOCK_TIME = 12

ALIAS_OFFSET = 0x1111000000000000000000000000000000001111
ADDRESS_MODULUS = 1 << 160

ZERO_BYTE_GAS = 4
NONZERO_BYTE_GAS = 16
EVENT_BYTE_GAS = 8
