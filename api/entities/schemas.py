"""
Entity variants returned by the API.

Every variant is a frozen pydantic model that keeps unknown fields
(`extra="allow"`), so records coming from the document store are copied across
structurally. `OpaqueEntity` is the catch-all for collections with no
registered variant.

Each variant knows how to build its own `self_url` from its fields plus, where
needed, sibling entities found in the relations map.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from . import links
from .links import Hyperlink

RelationsMap = dict[str, dict[str, "BaseEntity"]]


class BaseEntity(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    # Timestamps go back out exactly as stored.
    created_at: Any = None
    updated_at: Any = None
    self_url: Hyperlink | None = None

    def build_hyperlink(self, relations: RelationsMap | None = None) -> Hyperlink | None:
        return None

    def with_hyperlink(self, relations: RelationsMap | None = None) -> BaseEntity:
        """
        Return a decorated copy; the instance itself is never touched.
        """
        link = self.build_hyperlink(relations)
        if link is None:
            return self
        return self.model_copy(update={"self_url": link})


class OpaqueEntity(BaseEntity):
    pass


class User(BaseEntity):
    email: str | None = None
    username: str | None = None
    nickname: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    email_verified: bool | None = None

    def build_hyperlink(self, relations: RelationsMap | None = None) -> Hyperlink:
        name = links.segment(self.username)
        return links.create_ref(f"/users/{name or self.id}")


class Organization(BaseEntity):
    name: str | None = None
    billing_email: str | None = None
    allow_google_login: bool | None = None

    def build_hyperlink(self, relations: RelationsMap | None = None) -> Hyperlink:
        name = links.segment(self.name)
        return links.create_ref(f"/organizations/{name or self.id}")


class Team(BaseEntity):
    name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    location: str | None = None
    visibility: str | None = None
    organization_id: str | None = None

    def build_hyperlink(self, relations: RelationsMap | None = None) -> Hyperlink:
        name = links.segment(self.name)
        return links.create_ref(f"/teams/{name or self.id}")


class Report(BaseEntity):
    name: str | None = None
    title: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    comment_ids: list[str] | None = None

    def build_hyperlink(self, relations: RelationsMap | None = None) -> Hyperlink:
        name = links.segment(self.name)
        owner = self._owner_name(relations)
        if name and owner:
            return links.create_ref(f"/reports/{owner}/{name}")
        return links.create_ref(f"/reports/{self.id}")

    def _owner_name(self, relations: RelationsMap | None) -> str | None:
        # Reports are addressed under their team; a personal report under its author.
        team = links.lookup(relations, "team", self.team_id)
        if team is not None:
            return links.segment(getattr(team, "name", None))
        user = links.lookup(relations, "user", self.user_id)
        if user is not None:
            return links.segment(getattr(user, "username", None))
        return None


class Comment(BaseEntity):
    text: str | None = None
    user_id: str | None = None
    report_id: str | None = None
    comment_id: str | None = None

    def build_hyperlink(self, relations: RelationsMap | None = None) -> Hyperlink:
        report = links.lookup(relations, "report", self.report_id)
        if report is not None:
            report_link = report.build_hyperlink(relations)
            if report_link is not None:
                return links.create_ref(f"{report_link.ui}/comments/{self.id}")
        return links.create_ref(f"/comments/{self.id}")


ENTITY_VARIANTS: dict[str, type[BaseEntity]] = {
    "User": User,
    "Organization": Organization,
    "Team": Team,
    "Report": Report,
    "Comment": Comment,
}


def entity_to_wire(entity: BaseEntity) -> dict[str, Any]:
    # Only fields the record actually carried, plus self_url once decorated.
    present = set(entity.model_fields_set) | set(entity.model_extra or {})
    return {k: v for k, v in entity.model_dump(mode="json", warnings=False).items() if k in present}
