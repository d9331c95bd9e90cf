"""Batch correlation for a device's credential assets.

A batch id ties together the iCloud profile, proxy and social accounts that
were live on a device at the same time, so that once they are archived the
console can show what was burned together.
"""
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import ICloudProfile, Proxy, SocialAccount

logger = logging.getLogger(__name__)

# Only used when serializing groups; the data model keys null batches by None
NO_BATCH_KEY = "no-batch"


async def _latest_batch_id(db: AsyncSession, model, device_id: int, statuses: tuple) -> Optional[str]:
    """Most recent non-null batch id among the device's assets in the given statuses.

    Returns None only when no such row exists; query errors propagate.
    """
    result = await db.execute(
        select(model.batch_id)
        .where(
            model.device_id == device_id,
            model.status.in_(statuses),
            model.batch_id.is_not(None),
        )
        .order_by(model.created_at.desc())
        .limit(1)
    )
    return result.scalars().first()


async def resolve_batch_id(db: AsyncSession, device_id: int) -> str:
    """Pick the batch id a new credential asset on this device should carry.

    Priority: active iCloud profile, then the newest active proxy, then the
    newest active or draft social account. Falls back to a fresh UUID4.

    Two assets created concurrently on a device with no tagged asset yet may
    each get their own fresh id; there is no locking.
    """
    batch_id = await _latest_batch_id(db, ICloudProfile, device_id, ("active",))
    if batch_id:
        return batch_id

    batch_id = await _latest_batch_id(db, Proxy, device_id, ("active",))
    if batch_id:
        return batch_id

    batch_id = await _latest_batch_id(db, SocialAccount, device_id, ("active", "draft"))
    if batch_id:
        return batch_id

    batch_id = str(uuid.uuid4())
    logger.info(f"Starting new batch {batch_id} for device {device_id}")
    return batch_id


async def stamp_batch_id(db: AsyncSession, asset) -> None:
    """Give an asset a batch id if it has none. Existing ids are never replaced."""
    if asset.batch_id:
        return
    asset.batch_id = await resolve_batch_id(db, asset.device_id)


@dataclass
class BatchGroup:
    """Archived assets that shared one batch id."""
    batch_id: Optional[str]
    profile: Optional[ICloudProfile] = None
    social_accounts: List[SocialAccount] = field(default_factory=list)
    proxy: Optional[Proxy] = None
    # Overflow when a batch holds more than one profile or proxy
    extra_profiles: List[ICloudProfile] = field(default_factory=list)
    extra_proxies: List[Proxy] = field(default_factory=list)

    @property
    def assets(self) -> list:
        """Every asset in the group."""
        items = []
        if self.profile is not None:
            items.append(self.profile)
        items.extend(self.extra_profiles)
        items.extend(self.social_accounts)
        if self.proxy is not None:
            items.append(self.proxy)
        items.extend(self.extra_proxies)
        return items


def _newest_first(assets: Iterable) -> list:
    return sorted(assets, key=lambda a: a.created_at or datetime.min, reverse=True)


def group_by_batch(
    profiles: Iterable[ICloudProfile],
    social_accounts: Iterable[SocialAccount],
    proxies: Iterable[Proxy],
) -> Dict[Optional[str], BatchGroup]:
    """Group archived assets by batch id.

    Assets without a batch id all land in the single group keyed by None.
    No shape is enforced: a group may have no profile, no proxy, or several.
    """
    groups: Dict[Optional[str], BatchGroup] = {}

    def group_for(batch_id: Optional[str]) -> BatchGroup:
        if batch_id not in groups:
            groups[batch_id] = BatchGroup(batch_id=batch_id)
        return groups[batch_id]

    for profile in _newest_first(profiles):
        group = group_for(profile.batch_id)
        if group.profile is None:
            group.profile = profile
        else:
            group.extra_profiles.append(profile)

    for proxy in _newest_first(proxies):
        group = group_for(proxy.batch_id)
        if group.proxy is None:
            group.proxy = proxy
        else:
            group.extra_proxies.append(proxy)

    for account in _newest_first(social_accounts):
        group_for(account.batch_id).social_accounts.append(account)

    return groups
