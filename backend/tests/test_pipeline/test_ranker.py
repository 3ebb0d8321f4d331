import pytest

from config import settings
from models.schemas.candidate_profile import Coordinates
from models.schemas.job_posting import JobPosting
from models.schemas.rank_options import RankOptions
from services.pipeline.ranker import rank
from services.pipeline.score_engine import score_one

BANGALORE = Coordinates(latitude=12.9716, longitude=77.5946)
WHITEFIELD = Coordinates(latitude=12.9698, longitude=77.6700)
MUMBAI = Coordinates(latitude=19.0760, longitude=72.8777)


def _jobs() -> list[JobPosting]:
    return [
        JobPosting(id="near", title="Backend Engineer", skills=["python", "django", "aws"],
                   coordinates=WHITEFIELD, salary=100000),
        JobPosting(id="far", title="Backend Engineer", skills=["python", "django", "aws"],
                   coordinates=MUMBAI, salary=100000),
        JobPosting(id="remote-strong", title="Backend Engineer", skills=["python", "aws"],
                   salary=100000),
        JobPosting(id="remote-weak", title="Mainframe Developer", skills=["cobol", "jcl"]),
        JobPosting(id="downtown-weak", title="Mainframe Developer", skills=["cobol", "jcl", "rexx"],
                   coordinates=BANGALORE),
    ]


def _ids(results) -> list[str]:
    return [r.job_id for r in results]


class TestRank:
    def test_default_sorts_by_score_descending(self, candidate, fixed_now):
        results = rank(candidate, _jobs(), now=fixed_now)

        assert len(results) == 5
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_results_match_single_scoring(self, candidate, fixed_now):
        results = rank(candidate, _jobs(), now=fixed_now)
        expected = {job.id: score_one(candidate, job, now=fixed_now).score for job in _jobs()}
        assert {r.job_id: r.score for r in results} == expected

    def test_min_score(self, candidate, fixed_now):
        threshold = 60
        results = rank(candidate, _jobs(), RankOptions(min_score=threshold), now=fixed_now)

        expected = {
            job.id for job in _jobs()
            if score_one(candidate, job, now=fixed_now).score >= threshold
        }
        assert set(_ids(results)) == expected
        assert all(r.score >= threshold for r in results)

    def test_sort_by_distance_unknown_last(self, candidate, fixed_now):
        results = rank(candidate, _jobs(), RankOptions(sort_by_distance=True), now=fixed_now)

        assert _ids(results) == ["downtown-weak", "near", "far", "remote-strong", "remote-weak"]

    def test_unknown_distances_ordered_by_score(self, candidate, fixed_now):
        jobs = list(reversed(_jobs()))
        assert _ids(jobs)[1:3] == ["remote-weak", "remote-strong"]

        results = rank(candidate, jobs, RankOptions(sort_by_distance=True), now=fixed_now)

        assert _ids(results)[-2:] == ["remote-strong", "remote-weak"]

    def test_max_distance_keeps_unknown(self, candidate, fixed_now):
        results = rank(candidate, _jobs(), RankOptions(max_distance_km=100), now=fixed_now)

        assert "far" not in _ids(results)
        assert {"near", "downtown-weak", "remote-strong", "remote-weak"} <= set(_ids(results))

    def test_max_distance_ignored_without_profile_coordinates(self, candidate, fixed_now):
        nowhere = candidate.model_copy(update={"coordinates": None})
        results = rank(
            nowhere, _jobs(),
            RankOptions(max_distance_km=1, sort_by_distance=True),
            now=fixed_now,
        )

        assert len(results) == 5
        assert all(r.distance_km is None for r in results)
        scores = [r.score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_limit(self, candidate, fixed_now):
        everything = rank(candidate, _jobs(), now=fixed_now)
        top_two = rank(candidate, _jobs(), RankOptions(limit=2), now=fixed_now)

        assert _ids(top_two) == _ids(everything)[:2]
        assert rank(candidate, _jobs(), RankOptions(limit=0), now=fixed_now) == []

    def test_empty_jobs(self, candidate):
        assert rank(candidate, []) == []

    def test_basic_weights(self, candidate, fixed_now):
        results = rank(candidate, _jobs(), weights="basic", now=fixed_now)
        assert all(r.compatibility_factors.personality == 0 for r in results)


@pytest.mark.slow
class TestParallelRank:
    def test_pool_matches_inline(self, candidate, fixed_now, monkeypatch):
        jobs = _jobs() * 20
        inline = rank(candidate, jobs, now=fixed_now, max_workers=1)

        monkeypatch.setattr(settings, "parallel_threshold", 1)
        pooled = rank(candidate, jobs, now=fixed_now, max_workers=4)

        assert [(r.job_id, r.score) for r in pooled] == [(r.job_id, r.score) for r in inline]

    def test_default_workers_score_inline(self, candidate, fixed_now, monkeypatch):
        def _no_pool(*args, **kwargs):
            raise AssertionError("worker pool should not be created")

        monkeypatch.setattr(settings, "parallel_threshold", 1)
        monkeypatch.setattr("services.pipeline.ranker.ThreadPoolExecutor", _no_pool)

        results = rank(candidate, _jobs(), now=fixed_now)
        assert len(results) == 5
