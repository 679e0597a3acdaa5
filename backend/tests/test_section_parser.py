import time

from models.parsed_job import DEFAULT_DESCRIPTION
from services.section_parser import (
    clean_bullet_points,
    extract_benefits,
    extract_bullet_sections,
    extract_description,
    extract_requirements,
    extract_responsibilities,
)


def test_bullet_sections_from_sample(engineer_posting):
    sections = extract_bullet_sections(engineer_posting)
    assert [s.title for s in sections] == [
        "🎯 About the Role:",
        "✅ Key Requirements:",
        "🔧 Key Responsibilities:",
    ]
    assert sections[0].content == ""
    assert sections[1].content.count("\n") == 3
    assert sections[2].content.startswith("• Develop and maintain")


def test_bullets_before_first_header_are_ignored():
    sections = extract_bullet_sections("• stray\nSkills:\n• Python\nplain line\n- SQL")
    assert len(sections) == 1
    assert sections[0].title == "Skills:"
    assert sections[0].content == "• Python\n- SQL"


def test_clean_bullet_points():
    assert clean_bullet_points("  - one\n\n✅ two\n▪ three ") == "• one\n• two\n• three"


def test_section_content_is_verbatim():
    text = "What You'll Do:\n- Ship features\n- Fix bugs"
    assert extract_responsibilities(text) == "- Ship features\n- Fix bugs"


def test_empty_section_is_skipped(engineer_posting):
    responsibilities = extract_responsibilities(engineer_posting)
    assert responsibilities.splitlines()[0] == "• Develop and maintain scalable web applications"


def test_requirements_fall_back_to_bullet_run():
    text = "Requirements\n- Python\n- SQL\nApply now"
    assert extract_requirements(text) == "• Python\n• SQL"


def test_requirements_absent():
    assert extract_requirements("Just a short note") == ""


def test_benefits_run():
    text = "What we offer\n✅ Health insurance\n✅ Flexible hours\nApply today"
    assert extract_benefits(text) == "• Health insurance\n• Flexible hours"


def test_description_between_pitch_and_sections():
    text = "Acme Corp\nGreat opportunity to grow\nWork with us\nRequirements:\n- X"
    assert extract_description(text) == "Great opportunity to grow\nWork with us"


def test_description_without_pitch_starts_at_top():
    assert extract_description("Plain intro\nMore text") == "Plain intro\nMore text"


def test_description_default():
    assert extract_description("") == DEFAULT_DESCRIPTION
    assert extract_description("Requirements:\n- X") == DEFAULT_DESCRIPTION


def test_bullet_ending_in_colon_stays_in_section():
    text = "Requirements:\n• Must have:\n• Python\n• SQL"
    sections = extract_bullet_sections(text)
    assert [s.title for s in sections] == ["Requirements:"]
    assert extract_requirements(text) == "• Must have:\n• Python\n• SQL"


def test_dash_bullet_ending_in_colon_keeps_section_verbatim():
    text = "Key Responsibilities:\n- Own hiring for:\n- Tech roles\n- Sales roles"
    assert extract_responsibilities(text) == "- Own hiring for:\n- Tech roles\n- Sales roles"


def test_emoji_prefixed_header_still_detected():
    sections = extract_bullet_sections("✅ Must Have:\n• Python")
    assert sections[0].title == "✅ Must Have:"
    assert sections[0].content == "• Python"


def test_bullet_run_uses_first_keyword():
    text = "Requirements below\nnothing here\nrequirements again\n- Python\n- SQL"
    assert extract_requirements(text) == "• Python\n• SQL"


def test_long_paste_without_bullets_is_fast():
    text = "requirements duties benefits what we offer " * 5000
    start = time.perf_counter()
    assert extract_requirements(text) == ""
    assert extract_responsibilities(text) == ""
    assert extract_benefits(text) == ""
    assert time.perf_counter() - start < 2.0
