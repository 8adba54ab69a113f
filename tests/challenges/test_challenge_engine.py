"""Tests for the challenge progress evaluator."""
import logging
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

from challenges.engine import ChallengeProgressEvaluator


def _employee(employee_id, role, name=None):
    return SimpleNamespace(id=employee_id, role=role, name=name or employee_id)


def _week(employee_id, week_ending_date, **counters):
    values = {
        "education_points": 0,
        "proposals_presented": 0,
        "contracts_signed": 0,
        "mql": 0,
        "visits_scheduled": 0,
        "total_points": 0,
    }
    values.update(counters)
    return SimpleNamespace(employee_id=employee_id, week_ending_date=week_ending_date, **values)


def _proposal(closer_id, total_value, closing_date, status="WON", sdr_id=None, created_at=None):
    return SimpleNamespace(
        closer_id=closer_id,
        sdr_id=sdr_id,
        total_value=Decimal(str(total_value)),
        status=status,
        closing_date=closing_date,
        created_at=created_at or datetime(2025, 1, 1, 12, 0),
    )


def _challenge(target_type, target_value=100, participant_ids=None, start=date(2025, 3, 1), end=date(2025, 3, 31)):
    return SimpleNamespace(
        id="ch-1",
        target_type=target_type,
        target_value=Decimal(str(target_value)),
        participant_ids=participant_ids or [],
        start_date=start,
        end_date=end,
        status="active",
    )


EMPLOYEES = [
    _employee("a", "SDR", "Ana"),
    _employee("b", "CLOSER", "Bruno"),
    _employee("boss", "ADMIN", "Chefe"),
]


class TestResolveParticipants:
    def test_default_pool_excludes_admins(self):
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], [])

        assert evaluator.resolve_participants(_challenge("points")) == ["a", "b"]

    def test_explicit_list_is_authoritative(self):
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], [])
        challenge = _challenge("points", participant_ids=["boss", "a", "boss"])

        assert evaluator.resolve_participants(challenge) == ["boss", "a"]

    def test_narrowing_to_one_employee(self):
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], [])
        challenge = _challenge("points", participant_ids=["a"])

        assert evaluator.resolve_participants(challenge, employee_id="a") == ["a"]
        assert evaluator.resolve_participants(challenge, employee_id="b") == []


class TestComputeProgress:
    def test_mql_sums_participants_only(self):
        records = [
            _week("a", date(2025, 3, 7), mql=3),
            _week("a", date(2025, 3, 14), mql=5),
            _week("b", date(2025, 3, 14), mql=100),
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, records, [])

        progress = evaluator.compute_progress(_challenge("mql", participant_ids=["a"]))

        assert progress == Decimal("8")

    def test_window_is_inclusive(self):
        records = [
            _week("a", date(2025, 2, 28), total_points=50),
            _week("a", date(2025, 3, 1), total_points=1),
            _week("a", date(2025, 3, 31), total_points=2),
            _week("a", date(2025, 4, 1), total_points=50),
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, records, [])

        assert evaluator.compute_progress(_challenge("points")) == Decimal("3")

    def test_each_target_type_reads_its_counter(self):
        records = [
            _week(
                "a",
                date(2025, 3, 7),
                total_points=1,
                mql=2,
                visits_scheduled=3,
                contracts_signed=4,
                education_points=5,
            )
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, records, [])

        assert evaluator.compute_progress(_challenge("points")) == 1
        assert evaluator.compute_progress(_challenge("mql")) == 2
        assert evaluator.compute_progress(_challenge("visitas_agendadas")) == 3
        assert evaluator.compute_progress(_challenge("contratos_assinados")) == 4
        assert evaluator.compute_progress(_challenge("pontos_educacao")) == 5

    def test_admin_records_ignored_in_default_pool(self):
        records = [_week("boss", date(2025, 3, 7), total_points=40)]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, records, [])

        assert evaluator.compute_progress(_challenge("points")) == 0

    def test_sales_sums_raw_total_value(self):
        proposals = [_proposal("b", 5000, date(2025, 3, 10))]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], proposals)
        challenge = _challenge("sales", target_value=20000)

        progress = evaluator.compute_progress(challenge)

        assert progress == Decimal("5000")
        assert evaluator.progress_percentage(challenge, progress) == Decimal("25")

    def test_sales_counts_sdr_originator(self):
        proposals = [_proposal("outsider", 700, date(2025, 3, 10), sdr_id="a")]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], proposals)

        assert evaluator.compute_progress(_challenge("sales", participant_ids=["a"])) == Decimal("700")

    def test_sales_excludes_proposals_outside_participants(self):
        proposals = [
            _proposal("outsider", 700, date(2025, 3, 10), sdr_id="other"),
            _proposal("b", 300, date(2025, 3, 11)),
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], proposals)

        assert evaluator.compute_progress(_challenge("sales", participant_ids=["b"])) == Decimal("300")

    def test_sales_ignores_open_and_out_of_window_deals(self):
        proposals = [
            _proposal("b", 100, date(2025, 3, 10), status="NEGOTIATION"),
            _proposal("b", 200, date(2025, 4, 1)),
            _proposal("b", 400, None, created_at=datetime(2025, 3, 20, 9, 0)),
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], proposals)

        # The last deal has no closing date and falls back to its creation date.
        assert evaluator.compute_progress(_challenge("sales")) == Decimal("400")

    def test_unknown_target_type_is_zero_and_logged(self, caplog):
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [_week("a", date(2025, 3, 7), mql=3)], [])

        with caplog.at_level(logging.WARNING, logger="challenges.engine"):
            progress = evaluator.compute_progress(_challenge("ligacoes"))

        assert progress == 0
        assert "Unknown challenge target type" in caplog.text


class TestPercentageAndRanking:
    def test_percentage_is_capped_at_100(self):
        challenge = _challenge("points", target_value=10)

        assert ChallengeProgressEvaluator.progress_percentage(challenge, 25) == Decimal("100")

    def test_percentage_is_zero_without_target(self):
        challenge = _challenge("points", target_value=0)

        assert ChallengeProgressEvaluator.progress_percentage(challenge, 25) == Decimal("0")

    def test_individual_contributions_sum_to_aggregate(self):
        records = [
            _week("a", date(2025, 3, 7), total_points=4),
            _week("b", date(2025, 3, 7), total_points=9),
            _week("b", date(2025, 3, 14), total_points=1),
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, records, [])
        challenge = _challenge("points")

        ranking = evaluator.individual_contributions(challenge)

        assert [(row["employee_id"], row["progress"]) for row in ranking] == [("b", 10), ("a", 4)]
        assert ranking[0]["name"] == "Bruno"
        assert sum(row["progress"] for row in ranking) == evaluator.compute_progress(challenge)

    def test_ties_keep_participant_order(self):
        records = [
            _week("a", date(2025, 3, 7), mql=2),
            _week("b", date(2025, 3, 7), mql=2),
        ]
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, records, [])

        ranking = evaluator.individual_contributions(_challenge("mql", participant_ids=["b", "a"]))

        assert [row["employee_id"] for row in ranking] == ["b", "a"]

    def test_unknown_participant_is_named_by_id(self):
        evaluator = ChallengeProgressEvaluator(EMPLOYEES, [], [])

        ranking = evaluator.individual_contributions(_challenge("mql", participant_ids=["ghost"]))

        assert ranking == [{"employee_id": "ghost", "name": "ghost", "progress": 0}]

    def test_days_remaining(self):
        challenge = _challenge("points")

        assert ChallengeProgressEvaluator.days_remaining(challenge, date(2025, 3, 25)) == 6
        assert ChallengeProgressEvaluator.days_remaining(challenge, date(2025, 4, 2)) == -2
