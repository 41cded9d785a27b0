# =============================================================================
# core/services/sponsorship_service.py - Sponsorship Business Logic
# =============================================================================
# Handles the life of a sponsorship offer:
# - Brands create offers for influencers
# - Influencers accept or reject pending offers
# - Brands cancel offers or mark accepted ones as completed
#
# brand_id and influencer_id columns hold the owning *user* ids, so ownership
# checks compare directly against the authenticated user. Every status
# change notifies the other party over WebSocket.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import (
    SupabaseClient,
    SupabaseClientError,
    BRANDS_TABLE,
    INFLUENCERS_TABLE,
    SPONSORSHIPS_TABLE,
    USERS_TABLE,
)
from lib.utils import normalize_uuid, utcnow_iso
from core.models.sponsorship import SponsorshipCreate, SponsorshipStatus
from core.models.user import UserRole
from core.services.brand_service import brand_display_name
from app.exceptions import (
    BrandProfileRequiredError,
    InfluencerNotFoundError,
    InvalidStatusTransitionError,
    PermissionDeniedError,
    SponsorshipNotFoundError,
)
from app.websocket.broadcast import (
    publish_notification,
    NEW_SPONSORSHIP,
    SPONSORSHIP_ACCEPTED,
    SPONSORSHIP_CANCELLED,
    SPONSORSHIP_COMPLETED,
    SPONSORSHIP_REJECTED,
)

logger = logging.getLogger(__name__)

UNKNOWN_INFLUENCER = "Unknown Influencer"

# Target status -> (party allowed to make the move, event sent to the other party)
_STATUS_ACTIONS: dict[SponsorshipStatus, tuple[str, str]] = {
    SponsorshipStatus.ACCEPTED: ("influencer", SPONSORSHIP_ACCEPTED),
    SponsorshipStatus.REJECTED: ("influencer", SPONSORSHIP_REJECTED),
    SponsorshipStatus.CANCELLED: ("brand", SPONSORSHIP_CANCELLED),
    SponsorshipStatus.COMPLETED: ("brand", SPONSORSHIP_COMPLETED),
}


def _list(query_builder, context: str) -> list[dict[str, Any]]:
    try:
        return query_builder.execute().data or []
    except Exception as e:
        logger.error(f"Failed to list sponsorships ({context}): {e}")
        raise SupabaseClientError(
            message=f"Failed to list sponsorships: {e}",
            code="FETCH_FAILED",
            details={"query": context},
        )


class SponsorshipService:
    """Service for sponsorship operations."""

    # -------------------------------------------------------------------------
    # Presentation
    # -------------------------------------------------------------------------

    @staticmethod
    def present_many(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """
        Attach brand and influencer summaries to sponsorship rows.

        Looks up every referenced user and profile in three queries, not
        three per row.
        """
        if not rows:
            return []

        brand_ids = sorted({normalize_uuid(r["brand_id"]) for r in rows})
        influencer_ids = sorted({normalize_uuid(r["influencer_id"]) for r in rows})

        users = {
            u["id"]: u
            for u in SupabaseClient.fetch_many(
                USERS_TABLE, "id", sorted(set(brand_ids) | set(influencer_ids)),
                columns="id, name, email",
            )
        }
        brands = {
            b["user_id"]: b
            for b in SupabaseClient.fetch_many(
                BRANDS_TABLE, "user_id", brand_ids,
                columns="id, user_id, company_name, contact_email, logo_url",
            )
        }
        influencers = {
            i["user_id"]: i
            for i in SupabaseClient.fetch_many(
                INFLUENCERS_TABLE, "user_id", influencer_ids,
                columns="id, user_id, handle, avatar_url",
            )
        }

        presented = []
        for row in rows:
            brand_user_id = normalize_uuid(row["brand_id"])
            influencer_user_id = normalize_uuid(row["influencer_id"])

            brand = brands.get(brand_user_id)
            influencer = influencers.get(influencer_user_id) or {}
            influencer_user = users.get(influencer_user_id) or {}

            presented.append({
                **row,
                "brand": {
                    "id": brand.get("id") if brand else None,
                    "user_id": brand_user_id,
                    "name": brand_display_name(brand, users.get(brand_user_id)),
                    "logo_url": brand.get("logo_url") if brand else None,
                },
                "influencer": {
                    "id": influencer.get("id"),
                    "user_id": influencer_user_id,
                    "handle": influencer.get("handle"),
                    "name": influencer_user.get("name") or UNKNOWN_INFLUENCER,
                    "avatar_url": influencer.get("avatar_url"),
                },
            })

        return presented

    @staticmethod
    def present(row: dict[str, Any]) -> dict[str, Any]:
        return SponsorshipService.present_many([row])[0]

    # -------------------------------------------------------------------------
    # Create
    # -------------------------------------------------------------------------

    @staticmethod
    def create(brand_user_id: str | UUID, payload: SponsorshipCreate) -> dict[str, Any]:
        """
        Create a pending sponsorship from a brand to an influencer.

        Args:
            brand_user_id: Authenticated brand user
            payload: Offer details; influencer_id may be a profile id or the
                influencer's user id

        Raises:
            BrandProfileRequiredError: If the brand has no profile yet
            InfluencerNotFoundError: If the influencer doesn't exist
        """
        if not SupabaseClient.fetch_brand_by_user(brand_user_id):
            raise BrandProfileRequiredError()

        influencer = (
            SupabaseClient.fetch_influencer(payload.influencer_id)
            or SupabaseClient.fetch_influencer_by_user(payload.influencer_id)
        )
        if not influencer:
            raise InfluencerNotFoundError(str(payload.influencer_id))

        now = utcnow_iso()
        row = SupabaseClient.insert_row(SPONSORSHIPS_TABLE, {
            "brand_id": normalize_uuid(brand_user_id),
            "influencer_id": normalize_uuid(influencer["user_id"]),
            "title": payload.title,
            "description": payload.description,
            "budget": payload.budget,
            "deliverables": payload.deliverables,
            "status": SponsorshipStatus.PENDING.value,
            "created_at": now,
            "updated_at": now,
        })

        logger.info(
            f"Created sponsorship {row['id']} from brand {brand_user_id} "
            f"to influencer {influencer['user_id']}"
        )

        sponsorship = SponsorshipService.present(row)
        publish_notification(influencer["user_id"], NEW_SPONSORSHIP, sponsorship)
        return sponsorship

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    @staticmethod
    def list_for_influencer(user_id: str | UUID) -> list[dict[str, Any]]:
        """Offers received by an influencer, newest first."""
        client = SupabaseClient.get_client()
        rows = _list(
            client.table(SPONSORSHIPS_TABLE)
            .select("*")
            .eq("influencer_id", normalize_uuid(user_id))
            .order("created_at", desc=True),
            "influencer",
        )
        return SponsorshipService.present_many(rows)

    @staticmethod
    def list_for_brand(user_id: str | UUID) -> list[dict[str, Any]]:
        """Offers sent by a brand, newest first."""
        client = SupabaseClient.get_client()
        rows = _list(
            client.table(SPONSORSHIPS_TABLE)
            .select("*")
            .eq("brand_id", normalize_uuid(user_id))
            .order("created_at", desc=True),
            "brand",
        )
        return SponsorshipService.present_many(rows)

    @staticmethod
    def list_open() -> list[dict[str, Any]]:
        """All pending offers, newest first."""
        client = SupabaseClient.get_client()
        rows = _list(
            client.table(SPONSORSHIPS_TABLE)
            .select("*")
            .eq("status", SponsorshipStatus.PENDING.value)
            .order("created_at", desc=True),
            "open",
        )
        return SponsorshipService.present_many(rows)

    @staticmethod
    def recent_activity(user_id: str | UUID, limit: int = 5) -> list[dict[str, Any]]:
        """The user's most recently updated sponsorships, on either side."""
        user_id = normalize_uuid(user_id)
        client = SupabaseClient.get_client()
        rows = _list(
            client.table(SPONSORSHIPS_TABLE)
            .select("*")
            .or_(f"brand_id.eq.{user_id},influencer_id.eq.{user_id}")
            .order("updated_at", desc=True)
            .limit(limit),
            "activity",
        )
        return SponsorshipService.present_many(rows)

    @staticmethod
    def get_for_party(
        sponsorship_id: str | UUID,
        user_id: str | UUID,
        role: UserRole = UserRole.BRAND,
    ) -> dict[str, Any]:
        """
        Get a sponsorship the user is a party to.

        Raises:
            SponsorshipNotFoundError: If it doesn't exist
            PermissionDeniedError: If the user is neither its brand nor its influencer
        """
        row = SupabaseClient.fetch_sponsorship(sponsorship_id)
        if not row:
            raise SponsorshipNotFoundError(str(sponsorship_id))

        parties = {normalize_uuid(row["brand_id"]), normalize_uuid(row["influencer_id"])}
        if normalize_uuid(user_id) not in parties and role != UserRole.ADMIN:
            raise PermissionDeniedError(
                "Not authorized to view this sponsorship",
                details={"sponsorship_id": str(sponsorship_id)},
            )

        return SponsorshipService.present(row)

    # -------------------------------------------------------------------------
    # Status changes
    # -------------------------------------------------------------------------

    @staticmethod
    def change_status(
        sponsorship_id: str | UUID,
        user_id: str | UUID,
        target: SponsorshipStatus,
    ) -> dict[str, Any]:
        """
        Move a sponsorship to `target` on behalf of one of its parties.

        Influencers accept or reject; brands cancel or complete.

        Raises:
            SponsorshipNotFoundError: If it doesn't exist
            PermissionDeniedError: If the user isn't the party allowed to do this
            InvalidStatusTransitionError: If the current status doesn't allow it
        """
        target = SponsorshipStatus(target)
        if target not in _STATUS_ACTIONS:
            raise InvalidStatusTransitionError(str(sponsorship_id), "any", target.value)
        party, event = _STATUS_ACTIONS[target]

        row = SupabaseClient.fetch_sponsorship(sponsorship_id)
        if not row:
            raise SponsorshipNotFoundError(str(sponsorship_id))

        owner_column = "influencer_id" if party == "influencer" else "brand_id"
        other_column = "brand_id" if party == "influencer" else "influencer_id"

        if normalize_uuid(row[owner_column]) != normalize_uuid(user_id):
            logger.warning(
                f"User {user_id} tried to set sponsorship {sponsorship_id} to {target.value}"
            )
            raise PermissionDeniedError(
                f"Only the sponsorship's {party} can mark it {target.value}",
                details={"sponsorship_id": str(sponsorship_id)},
            )

        current = SponsorshipStatus(row["status"])
        if not current.can_transition_to(target):
            raise InvalidStatusTransitionError(
                str(sponsorship_id), current.value, target.value
            )

        # Conditional on the status we checked, so a concurrent change wins once
        updated = SupabaseClient.update_row(
            SPONSORSHIPS_TABLE,
            sponsorship_id,
            {"status": target.value, "updated_at": utcnow_iso()},
            expected={"status": current.value},
        )
        if not updated:
            latest = SupabaseClient.fetch_sponsorship(sponsorship_id)
            if not latest:
                raise SponsorshipNotFoundError(str(sponsorship_id))
            logger.warning(
                f"Sponsorship {sponsorship_id} changed to {latest['status']} "
                f"before {target.value} could be applied"
            )
            raise InvalidStatusTransitionError(
                str(sponsorship_id), latest["status"], target.value
            )

        logger.info(
            f"Sponsorship {sponsorship_id}: {current.value} -> {target.value} by {user_id}"
        )

        sponsorship = SponsorshipService.present(updated)
        publish_notification(row[other_column], event, sponsorship)
        return sponsorship

    @staticmethod
    def accept(sponsorship_id: str | UUID, user_id: str | UUID) -> dict[str, Any]:
        return SponsorshipService.change_status(sponsorship_id, user_id, SponsorshipStatus.ACCEPTED)

    @staticmethod
    def reject(sponsorship_id: str | UUID, user_id: str | UUID) -> dict[str, Any]:
        return SponsorshipService.change_status(sponsorship_id, user_id, SponsorshipStatus.REJECTED)

    @staticmethod
    def cancel(sponsorship_id: str | UUID, user_id: str | UUID) -> dict[str, Any]:
        return SponsorshipService.change_status(sponsorship_id, user_id, SponsorshipStatus.CANCELLED)

    @staticmethod
    def complete(sponsorship_id: str | UUID, user_id: str | UUID) -> dict[str, Any]:
        return SponsorshipService.change_status(sponsorship_id, user_id, SponsorshipStatus.COMPLETED)
