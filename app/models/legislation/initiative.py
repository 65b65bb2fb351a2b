"""Initiative (bill) records as supplied by the data loader.

Each field reads the key of the dashboard JSON export (also used when dumping),
the camelCase name of the exchange format, or the Python name.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import AliasChoices, Field

from app.models.common import BaseRecord


class Deputy(BaseRecord):
    """Individual member who did not vote."""

    code: int | str | None = Field(
        alias="codParlamentario", default=None, validation_alias=AliasChoices("codParlamentario", "id", "code")
    )
    name: str = Field(
        alias="apellidosNombre", default="", validation_alias=AliasChoices("apellidosNombre", "displayName", "name")
    )
    group: str = Field(alias="grupo", default="", validation_alias=AliasChoices("grupo", "partyOrGroup", "group"))
    formation: str = Field(alias="formacion", default="")
    avatar: str | None = None

    @property
    def key(self) -> str:
        """Stable identifier: parliamentary code, else full name."""
        return str(self.code) if self.code else self.name


class VoteTotals(BaseRecord):
    """Chamber-wide totals of one vote."""

    favor: int = Field(alias="afavor", default=0)
    against: int = Field(alias="enContra", default=0)
    abstain: int = Field(alias="abstenciones", default=0)
    present: int | None = Field(alias="presentes", default=None)
    no_vote_count: int = Field(
        alias="noVotan", default=0, validation_alias=AliasChoices("noVotan", "noVoteCount", "no_vote_count")
    )

    @property
    def cast(self) -> int:
        return self.favor + self.against + self.abstain


class VoteBreakdown(BaseRecord):
    """Per-party counts (desglose) for each vote category."""

    yes: dict[str, int] | None = None
    no: dict[str, int] | None = None
    abstention: dict[str, int] | None = None
    no_vote: dict[str, int] | None = Field(default=None, validation_alias=AliasChoices("no_vote", "noVote"))

    def category(self, name: str) -> Mapping[str, int]:
        """Counts of one category, empty when missing."""
        return getattr(self, name) or {}


class VoteResult(BaseRecord):
    totals: VoteTotals | None = Field(
        alias="totales", default=None, validation_alias=AliasChoices("totales", "totals")
    )
    desglose: VoteBreakdown | None = None


class Voting(BaseRecord):
    """Vote attached to an initiative."""

    exists: bool = False
    yes: int = 0
    no: int = 0
    abstentions: int = 0
    present_count: int | None = Field(
        alias="presentes", default=None, validation_alias=AliasChoices("presentes", "presentCount", "present_count")
    )
    result: VoteResult | None = None
    no_vote_list: list[Deputy] | None = Field(
        alias="noVote", default=None, validation_alias=AliasChoices("noVote", "noVoteList", "no_vote_list")
    )
    missing_deputies: list[Deputy] | None = Field(alias="missingDeputies", default=None)

    @property
    def totals(self) -> VoteTotals | None:
        return self.result.totals if self.result else None

    @property
    def desglose(self) -> VoteBreakdown | None:
        return self.result.desglose if self.result else None


class Initiative(BaseRecord):
    """Legislative initiative, possibly voted."""

    class Config:
        extra = "allow"

    status: str = Field(alias="resultado_tram", default="")
    author: str = Field(alias="autor", default="")
    title: str = Field(alias="titulo", default="")
    link: str = Field(alias="enlace", default="")
    submitted_on: str = Field(alias="fecha_presentado", default="")
    voting: Voting | None = None

    @property
    def voted(self) -> bool:
        return self.voting is not None and self.voting.exists


def parse_initiatives(records: Iterable[Initiative | dict[str, Any]]) -> list[Initiative]:
    """Validate raw records, keeping their order."""
    return [r if isinstance(r, Initiative) else Initiative.model_validate(r) for r in records]
