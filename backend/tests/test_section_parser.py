from datetime import datetime

from services.section_parser import (
    analyze_sections,
    extract_contact_info,
    has_quantified_results,
    has_recent_experience,
    has_work_authorisation,
)


def test_strong_cv_sections(strong_cv):
    result = analyze_sections(strong_cv)
    assert result.details["contact"].score == 90
    assert result.details["experience"].score == 100
    assert result.details["skills"].score == 100
    assert result.details["education"].score == 100
    assert result.score == 98


def test_weak_cv_sections(weak_cv):
    result = analyze_sections(weak_cv)
    # Only the word "contact" is recognised
    assert result.details["contact"].score == 50
    assert result.details["experience"].score == 0
    assert result.details["skills"].score == 0
    assert result.details["education"].score == 0
    assert result.score == 12
    assert "Email address missing" in result.details["contact"].issues


def test_all_sections_reported():
    result = analyze_sections("")
    assert set(result.details) == {"contact", "experience", "skills", "education"}
    assert result.score == 0


def test_section_scores_capped():
    cv = (
        "Contact details: jane@example.ie, 087 123 4567\n"
        "Experience: Engineer and Manager, 2018 - 2024\n"
    )
    result = analyze_sections(cv)
    assert all(0 <= r.score <= 100 for r in result.details.values())
    assert result.details["contact"].score == 90
    assert result.details["experience"].score == 100


def test_date_range_is_not_a_phone():
    result = analyze_sections("Contact\nEmail: x@y.com\nDeveloper at Acme 01-2015 - 06-2019")
    assert result.details["contact"].score == 70
    assert "Irish phone number missing" in result.details["contact"].issues


def test_skills_partial_credit():
    # Three skills, no header
    result = analyze_sections("python, docker and aws")
    assert result.details["skills"].score == 30


def test_extract_contact_info(strong_cv):
    info = extract_contact_info(strong_cv)
    assert info["email"] == "aoife.murphy@example.ie"
    assert info["linkedin"] == "linkedin.com/in/aoifemurphy"
    assert info["irish_phone"] == "yes"
    assert info["github"] is None
    assert info["website"] is None


def test_extract_contact_info_links():
    info = extract_contact_info("github.com/aoife | https://aoife.dev")
    assert info["github"] == "github.com/aoife"
    assert info["website"] == "https://aoife.dev"
    assert info["email"] is None
    assert info["irish_phone"] is None


def test_has_quantified_results():
    assert has_quantified_results("reduced costs by 30%")
    assert has_quantified_results("managed a €2 million budget")
    assert has_quantified_results("grew revenue to 15k per month")
    assert not has_quantified_results("worked on many projects")


def test_has_recent_experience():
    now = datetime(2026, 6, 1)
    assert has_recent_experience("engineer, 2019 - present", now=now)
    assert has_recent_experience("engineer, 2020 - 2025", now=now)
    assert not has_recent_experience("engineer, 2012 - 2016", now=now)
    assert not has_recent_experience("no dates at all", now=now)


def test_has_work_authorisation():
    assert has_work_authorisation("EU Citizen, full right to work")
    assert has_work_authorisation("Holder of Stamp 4 permission")
    assert not has_work_authorisation("Software engineer")
    # whole words only
    assert not has_work_authorisation("built timestamp services, advisable")
