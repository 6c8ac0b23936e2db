from __future__ import annotations

import pytest

from app.services.rating_seed import (
    DEPARTMENTS,
    FEEDBACK_TEMPLATES,
    PROJECT_CATALOG,
    RATING_SALT,
    seeded_bio,
    seeded_choice,
    seeded_department,
    seeded_feedback,
    seeded_fraction,
    seeded_projects,
    seeded_rating,
    seeded_years_of_experience,
)

IDENTIFIERS = [-50, -1, 0, 1, 2, 7, 20, 208, 1_700_000_000_000]


@pytest.mark.parametrize("identifier", IDENTIFIERS)
def test_fraction_is_in_half_open_unit_range(identifier):
    value = seeded_fraction(identifier, RATING_SALT)
    assert 0.0 <= value < 1.0


def test_fraction_of_zero_identifier_is_zero():
    assert seeded_fraction(0, RATING_SALT) == 0.0


@pytest.mark.parametrize("identifier", IDENTIFIERS)
def test_rating_is_between_one_and_five(identifier):
    assert seeded_rating(identifier) in {1, 2, 3, 4, 5}


def test_rating_is_deterministic():
    assert [seeded_rating(i) for i in range(1, 51)] == [seeded_rating(i) for i in range(1, 51)]


def test_ratings_are_not_constant_across_ids():
    assert len({seeded_rating(i) for i in range(1, 101)}) > 1


def test_salts_give_independent_draws():
    assert seeded_fraction(5, 12345) != seeded_fraction(5, 54321)


@pytest.mark.parametrize("identifier", IDENTIFIERS)
def test_years_of_experience_range(identifier):
    assert 1 <= seeded_years_of_experience(identifier) <= 10


def test_department_is_stable_and_known():
    for identifier in range(1, 31):
        assert seeded_department(identifier) in DEPARTMENTS
        assert seeded_department(identifier) == seeded_department(identifier)


def test_seeded_choice_picks_from_options():
    options = ["a", "b", "c"]
    assert seeded_choice(42, 777, options) in options


def test_bio_mentions_years_and_known_department():
    bio = seeded_bio(3)
    years = seeded_years_of_experience(3)
    assert bio.startswith(f"Experienced professional with {years} years in ")
    assert any(f"in {dept}." in bio for dept in DEPARTMENTS)
    assert bio.endswith("Passionate about innovation and team collaboration.")


def test_projects_are_a_prefix_of_the_catalog():
    for identifier in range(1, 21):
        projects = seeded_projects(identifier)
        assert 1 <= len(projects) <= 3
        assert [p.id for p in projects] == [p.id for p in PROJECT_CATALOG[: len(projects)]]


def test_projects_are_copies_of_the_catalog():
    projects = seeded_projects(1)
    projects[0].completion = 1
    assert PROJECT_CATALOG[0].completion == 100


def test_feedback_is_a_renumbered_prefix_of_templates():
    for identifier in range(1, 21):
        feedback = seeded_feedback(identifier)
        assert 1 <= len(feedback) <= 3
        assert [f.id for f in feedback] == list(range(1, len(feedback) + 1))
        assert [f.reviewer for f in feedback] == [t[0] for t in FEEDBACK_TEMPLATES[: len(feedback)]]


def test_feedback_is_deterministic():
    assert seeded_feedback(9) == seeded_feedback(9)
