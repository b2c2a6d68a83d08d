"""
Positional bookkeeping for the statements signed by a BBS+ signature.

The issuer signs `proof_statements + document_statements`, one message
per canonical N-Quads line. A holder discloses a subset of those lines
and the verifier needs to know where each disclosed line sat in the
original message list. Everything in here operates on plain lists of
statement strings and never mutates its inputs.
"""

import logging

from .exceptions import StatementReconciliationError

logger = logging.getLogger(__name__)

BLANK_NODE_PREFIX = "_:c14n"
BLANK_NODE_IDENTIFIER_NAMESPACE = "urn:bnid:"


def _split_subject(statement: str) -> tuple[str, str]:
    subject, separator, remainder = statement.partition(" ")
    return subject, separator + remainder


def stabilize_blank_node(statement: str) -> str:
    """
    Gives a statement with a canonical blank node subject an addressable
    identifier, e.g. `_:c14n0` becomes `<urn:bnid:_:c14n0>`.
    """
    subject, remainder = _split_subject(statement)
    if not subject.startswith(BLANK_NODE_PREFIX):
        return statement
    return f"<{BLANK_NODE_IDENTIFIER_NAMESPACE}{subject}>{remainder}"


def restore_blank_node(statement: str) -> str:
    subject, remainder = _split_subject(statement)
    wrapped_prefix = f"<{BLANK_NODE_IDENTIFIER_NAMESPACE}{BLANK_NODE_PREFIX}"
    if not (subject.startswith(wrapped_prefix) and subject.endswith(">")):
        return statement
    return f"{subject[len(BLANK_NODE_IDENTIFIER_NAMESPACE) + 1:-1]}{remainder}"


def stabilize_blank_nodes(statements: list[str]) -> list[str]:
    return [stabilize_blank_node(statement) for statement in statements]


def restore_blank_nodes(statements: list[str]) -> list[str]:
    return [restore_blank_node(statement) for statement in statements]


def get_reveal_indices(
    document_statements: list[str], revealed_statements: list[str], proof_statement_count: int
) -> list[int]:
    """
    Maps the statements of a revealed sub-graph back to their positions
    in the signed message list.

    The result always starts with every proof statement index, followed
    by the position of each revealed statement, offset by the number of
    proof statements, in the order the revealed statements were given.
    Raises StatementReconciliationError if any revealed statement can not
    be found in the source document.
    """
    positions = {}
    for position, statement in enumerate(document_statements):
        positions.setdefault(statement, position)

    proof_indices = list(range(proof_statement_count))
    document_indices = []

    for statement in revealed_statements:
        if statement not in positions:
            logger.warning(f"Revealed statement not present in source document: {statement}")
            raise StatementReconciliationError(
                f"Revealed statement not present in source document: {statement}"
            )
        document_indices.append(proof_statement_count + positions[statement])

    logger.debug(
        f"Revealing {len(document_indices)} of {len(document_statements)} document statements"
    )
    return proof_indices + document_indices
