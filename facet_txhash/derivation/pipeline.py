"""
Derivation pipeline: L1 transaction hash -> Facet transaction hash.

Fetch the source transaction, classify it, decode the direct or event
envelope, read the historical mint rate, apply the path's mint formula and
hash the result. Every failure aborts the derivation; nothing partial is
returned and nothing is retried.
"""

from __future__ import annotations

from facet_txhash.chain.interfaces import ChainDataProvider
from facet_txhash.chain.models import SourceTransaction
from facet_txhash.config.env import ChainConfig
from facet_txhash.core.exceptions import NotFoundError
from facet_txhash.derivation.accounting import direct_mint_amount, event_mint_amount
from facet_txhash.derivation.classifier import EnvelopeKind, classify
from facet_txhash.derivation.constants import FACET_INBOX_ADDRESS, L2_BLOCK_TIME
from facet_txhash.derivation.direct_decoder import DirectEnvelope, decode_direct_envelope
from facet_txhash.derivation.event_decoder import EventEnvelope, decode_event_payload, find_facet_event
from facet_txhash.derivation.hashing import HashDeriver, compute_facet_transaction_hash
from facet_txhash.derivation.mint_rate import lookup_mint_rate
from facet_txhash.derivation.models import CanonicalTransaction, DerivationResult
from facet_txhash.txhash_logging import bind_transaction


async def _decode(
    tx: SourceTransaction,
    kind: EnvelopeKind,
    l1: ChainDataProvider,
) -> tuple[CanonicalTransaction, DirectEnvelope | EventEnvelope]:
    """Return the canonical fields (mint pending) and the envelope the mint formula needs."""
    if kind is EnvelopeKind.DIRECT:
        envelope = decode_direct_envelope(tx.input)
        canonical = CanonicalTransaction(
            kind=kind,
            from_address=tx.sender,
            to=envelope.to,
            value=envelope.value,
            data=envelope.data,
            gas_limit=envelope.gas_limit,
            mine_boost=envelope.mine_boost,
        )
        return canonical, envelope

    receipt = await l1.get_transaction_receipt(tx.hash)
    if receipt is None:
        raise NotFoundError("Transaction receipt not found")
    event = decode_event_payload(find_facet_event(receipt))
    canonical = CanonicalTransaction(
        kind=kind,
        from_address=event.from_address,
        to=event.to,
        value=event.value,
        data=event.data,
        gas_limit=event.gas_limit,
    )
    return canonical, event


async def derive_facet_transaction(
    l1_transaction_hash: str,
    chain: ChainConfig,
    l1: ChainDataProvider,
    l2: ChainDataProvider,
    *,
    inbox_address: str = FACET_INBOX_ADDRESS,
    block_time: int = L2_BLOCK_TIME,
    hash_deriver: HashDeriver = compute_facet_transaction_hash,
) -> DerivationResult:
    """Derive the Facet transaction (and its hash) for one L1 transaction."""
    log = bind_transaction(l1_transaction_hash, chain.l1_chain_id)

    tx = await l1.get_transaction(l1_transaction_hash)
    if tx is None:
        raise NotFoundError("Transaction not found")

    kind = classify(tx, inbox_address)
    log.info("facet_envelope_classified", kind=kind.value, to=tx.to)
    canonical, envelope = await _decode(tx, kind, l1)

    lookup = await lookup_mint_rate(tx, l1, l2, block_time)
    if kind is EnvelopeKind.DIRECT:
        mint = direct_mint_amount(envelope, chain.l2_chain_id, lookup.mint_rate)
    else:
        mint = event_mint_amount(envelope, lookup.mint_rate)
    canonical = canonical.with_mint_amount(mint)

    facet_hash = hash_deriver(
        l1_transaction_hash,
        canonical.from_address,
        canonical.to,
        canonical.value,
        canonical.data,
        canonical.gas_limit,
        mint,
    )
    log.info(
        "facet_hash_derived",
        kind=kind.value,
        l2_block=lookup.target_block,
        mint_rate=lookup.mint_rate,
        fct_mint_amount=mint,
        facet_tx_hash=facet_hash,
    )
    return DerivationResult(
        l1_transaction_hash=l1_transaction_hash,
        l1_chain_id=chain.l1_chain_id,
        transaction=canonical,
        mint_rate=lookup.mint_rate,
        l2_block_number=lookup.target_block,
        facet_transaction_hash=facet_hash,
    )
