"""Tests for input records and report entities."""

import pytest
from pydantic import ValidationError

from app.models import (
    ConsensusColor,
    ConsensusLabel,
    ConsensusMetric,
    Deputy,
    DeputyAbsence,
    Initiative,
    parse_initiatives,
)
from app.services.voting.participation import ParticipationAnalyzer

RAW = {
    "resultado_tram": "Approved",
    "autor": "Government",
    "titulo": "Budget Act",
    "enlace": "https://example.org/budget",
    "fecha_presentado": "2024-02-01",
    "expediente": "121/000001",
    "voting": {
        "exists": True,
        "yes": 178,
        "no": 171,
        "abstentions": 1,
        "presentes": 350,
        "result": {
            "totales": {"afavor": 178, "enContra": 171, "abstenciones": 1, "presentes": 350, "noVotan": 0},
            "desglose": {"yes": {"GS": 120}, "no": {"GP": 137}, "no_vote": {}},
        },
        "noVote": [{"codParlamentario": 12, "apellidosNombre": "García, Ana", "grupo": "GP", "formacion": "PP"}],
    },
}


class TestInitiative:
    def test_raw_keys(self):
        initiative = Initiative.model_validate(RAW)
        assert initiative.status == "Approved"
        assert initiative.author == "Government"
        assert initiative.voted
        assert initiative.voting.totals.cast == 350
        assert initiative.voting.desglose.category("yes") == {"GS": 120}
        assert initiative.voting.no_vote_list[0].name == "García, Ana"

    def test_missing_categories_are_empty(self):
        initiative = Initiative.model_validate(RAW)
        assert initiative.voting.desglose.category("abstention") == {}

    def test_nulls_fall_back_to_defaults(self):
        initiative = Initiative.model_validate(
            {"resultado_tram": None, "voting": {"exists": True, "yes": None, "no": 3, "result": None}}
        )
        assert initiative.status == ""
        assert initiative.voting.yes == 0
        assert initiative.voting.totals is None
        assert initiative.voting.desglose is None

    def test_empty_record(self):
        initiative = Initiative.model_validate({})
        assert not initiative.voted
        assert initiative.author == ""

    def test_extra_keys_kept(self):
        dumped = Initiative.model_validate(RAW).model_dump(by_alias=True)
        assert dumped["expediente"] == "121/000001"
        assert dumped["titulo"] == "Budget Act"

    def test_frozen(self):
        initiative = Initiative.model_validate(RAW)
        with pytest.raises(ValidationError):
            initiative.status = "Rejected"


class TestDeputy:
    def test_key_prefers_code(self):
        assert Deputy(code=12, name="García, Ana").key == "12"

    def test_key_falls_back_to_name(self):
        assert Deputy(name="García, Ana").key == "García, Ana"
        assert Deputy(code="", name="García, Ana").key == "García, Ana"

    def test_zero_code_falls_back_to_name(self):
        assert Deputy(code=0, name="García, Ana").key == "García, Ana"

    def test_exchange_names(self):
        deputy = Deputy.model_validate({"id": 1, "displayName": "Ana", "partyOrGroup": "GP"})
        assert (deputy.key, deputy.name, deputy.group) == ("1", "Ana", "GP")


class TestParse:
    def test_keeps_order_and_instances(self):
        existing = Initiative(title="Existing")
        parsed = parse_initiatives([RAW, existing, {"titulo": "Third"}])
        assert [i.title for i in parsed] == ["Budget Act", "Existing", "Third"]
        assert parsed[1] is existing


class TestEntities:
    def test_metric_to_dict(self):
        metric = ConsensusMetric(consensus_index=100, label=ConsensusLabel.UNANIMOUS, color=ConsensusColor.UNANIMOUS)
        assert metric.to_dict() == {"consensusIndex": 100, "label": "Unanimous", "color": "#10B981"}

    def test_optional_avatar_omitted(self):
        assert DeputyAbsence(name="García, Ana", party="PP", count=3).to_dict() == {
            "name": "García, Ana",
            "party": "PP",
            "count": 3,
        }


class TestExchangeNames:
    RECORD = {
        "status": "Approved",
        "author": "Government",
        "voting": {
            "exists": True,
            "yes": 170,
            "no": 168,
            "presentCount": 343,
            "result": {
                "totals": {"favor": 170, "against": 168, "abstain": 0, "present": 343, "noVoteCount": 5},
                "desglose": {"yes": {"GP": 170}, "no": {"GS": 168}, "noVote": {"GP": 5}},
            },
            "noVoteList": [{"id": 1, "displayName": "Ana", "partyOrGroup": "GP"}],
        },
    }

    def test_fields(self):
        voting = Initiative.model_validate(self.RECORD).voting
        assert voting.present_count == 343
        assert voting.totals.no_vote_count == 5
        assert voting.desglose.category("no_vote") == {"GP": 5}
        assert voting.no_vote_list[0].name == "Ana"

    def test_participation(self):
        stats = ParticipationAnalyzer().analyze([Initiative.model_validate(self.RECORD)])
        assert [(c.margin, c.missing) for c in stats.critical_absences] == [(2, 5)]
        assert [(a.party, a.count) for a in stats.absenteeism_ranking] == [("GP", 5)]
        assert [(d.name, d.party, d.count) for d in stats.deputy_ranking] == [("Ana", "GP", 1)]

    def test_dumps_dashboard_keys(self):
        dumped = Initiative.model_validate(self.RECORD).model_dump(by_alias=True)
        assert dumped["voting"]["result"]["totales"]["noVotan"] == 5
        assert dumped["voting"]["noVote"][0]["apellidosNombre"] == "Ana"
