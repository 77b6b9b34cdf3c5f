# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property and tenant resolution.

Leases and income reports reference their property loosely, by id or by the
title typed into the admin form. These helpers find the matching records in
the already-fetched collections and return None when nothing matches; callers
substitute display fallbacks instead of failing.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .core.primitives import TenantMatchPolicyEnum
from .records import ClientRecord, PropertyRecord

logger = logging.getLogger(__name__)


def _normalize(text: Optional[str]) -> str:
    return (text or "").strip().casefold()


def resolve_property(
    reference: Optional[str], properties: Iterable[PropertyRecord]
) -> Optional[PropertyRecord]:
    """
    Find the first property whose id equals the reference, or whose title
    equals it after case-insensitive, whitespace-trimmed comparison.

    Args:
        reference: Property id or title as stored on the lease/report
        properties: Known properties, in backend order

    Returns:
        The first matching property, or None
    """
    raw = (reference or "").strip()
    if not raw:
        return None

    wanted_title = _normalize(raw)
    for candidate in properties:
        if candidate.id == raw or _normalize(candidate.title) == wanted_title:
            return candidate

    logger.debug(f"No property matches reference {raw!r}")
    return None


def resolve_tenant(
    property_record: Optional[PropertyRecord],
    clients: Iterable[ClientRecord],
    policy: TenantMatchPolicyEnum = TenantMatchPolicyEnum.MOST_RECENT_BY_ID,
    references: Iterable[Optional[str]] = (),
) -> Optional[ClientRecord]:
    """
    Find the client whose property interest points at the given property.

    A client matches when its ``property_interest`` equals the property's id
    or title. Without a resolved property the raw ``references`` (id and/or
    title as typed on the record) are matched instead. Several historical
    tenants can share one unit; ``policy`` decides which of them is returned.

    Returns:
        The selected client, or None when nobody matches
    """
    if property_record is not None:
        candidates = [property_record.id, property_record.title]
    else:
        candidates = list(references)
    keys = {key.strip() for key in candidates if key and key.strip()}

    if not keys:
        return None

    matches: List[ClientRecord] = [
        client
        for client in clients
        if (client.property_interest or "").strip() in keys
    ]
    if not matches:
        logger.debug(f"No client registered for property keys {sorted(keys)}")
        return None

    if len(matches) > 1:
        logger.info(
            f"{len(matches)} clients share property keys {sorted(keys)}; "
            f"selecting by {policy.value}"
        )

    if policy == TenantMatchPolicyEnum.FIRST_MATCH:
        return matches[0]
    return max(matches, key=lambda client: client.id)
