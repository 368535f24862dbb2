"""Tests for the layout engine and the six resume templates."""

from __future__ import annotations

from datetime import date

import pytest

from resume_builder.exceptions import UnknownTemplateError
from resume_builder.services.resume_data import (
    Education,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
)
from resume_builder.templates import (
    Line,
    Rect,
    Text,
    TemplateId,
    get_template,
    layout,
    list_templates,
)
from resume_builder.templates.base import PageBuilder, Section
from resume_builder.templates.metrics import TextMeasurer

ALL_TEMPLATES = [t.value for t in TemplateId]
SUMMARY_TEMPLATES = [t for t in ALL_TEMPLATES if Section.SUMMARY in get_template(t).sections]


def _jane() -> ResumeData:
    return ResumeData(
        personal_info=PersonalInfo(
            first_name="Jane", last_name="Doe", title="Developer", email="jane@x.io"
        ),
        education=(
            Education(
                degree="B.Tech",
                field_of_study="CS",
                institution="X College",
                start_year=2020,
                end_year=2024,
            ),
        ),
        skills=(Skill(name="Python", category="technical"),),
    )


def _full() -> ResumeData:
    return _jane().model_copy(
        update={
            "projects": (
                Project(
                    title="Tracker",
                    description="Tracks habits",
                    technologies=("Python", "SQL"),
                    github="https://github.com/jane/tracker",
                ),
            ),
            "summary": "Engineer who ships.",
        }
    )


# ======================================================================
# Registry
# ======================================================================


class TestRegistry:
    def test_picker_order(self) -> None:
        assert list_templates() == [
            "modern",
            "minimal",
            "creative",
            "executive",
            "tech",
            "classic",
        ]

    def test_templates_have_display_metadata(self) -> None:
        for template_id in list_templates():
            template = get_template(template_id)
            assert template.name
            assert template.description

    def test_unknown_template(self) -> None:
        with pytest.raises(UnknownTemplateError) as exc_info:
            layout(_jane(), "fancy")
        assert exc_info.value.template_id == "fancy"
        assert "modern" in exc_info.value.available

    def test_accepts_enum_member(self) -> None:
        assert get_template(TemplateId.TECH).template_id is TemplateId.TECH


# ======================================================================
# Properties shared by every template
# ======================================================================


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
class TestAllTemplates:
    def test_layout_is_deterministic(self, template_id: str) -> None:
        assert layout(_full(), template_id) == layout(_full(), template_id)

    def test_footer_only_when_dated(self, template_id: str) -> None:
        undated = layout(_full(), template_id)
        dated = layout(_full(), template_id, generated_on=date(2024, 3, 7))

        assert not any(c.startswith("Generated on") for c in undated.text_contents())
        footer = dated.find_text("Generated on 3/7/2024")
        assert footer is not None
        assert footer.font_size == 8
        assert footer.y == pytest.approx(dated.height - 10)
        assert dated.primitives[: len(undated.primitives)] == undated.primitives

    def test_empty_sections_emit_nothing(self, template_id: str) -> None:
        page = layout(_jane(), template_id)
        contents = " ".join(page.text_contents()).lower()
        assert "projects" not in contents
        assert "summary" not in contents

    def test_empty_sections_do_not_move_cursor(self, template_id: str) -> None:
        with_empty = _jane().model_copy(update={"projects": (), "summary": "   "})
        assert layout(with_empty, template_id) == layout(_jane(), template_id)

    @pytest.mark.parametrize(
        "empty",
        [
            {"education": ()},
            {"education": (Education(degree="  ", institution=" ", start_year=2020),)},
        ],
        ids=["no-entries", "blank-entry"],
    )
    def test_empty_education_emits_nothing(self, template_id: str, empty: dict) -> None:
        template = get_template(template_id)
        full = layout(_full(), template_id)
        page = layout(_full().model_copy(update=empty), template_id)

        assert page.find_text(template.heading_label(Section.EDUCATION)) is None
        assert "X College" not in page.text_contents()
        # Skills takes over the slot Education would have used.
        skills = page.find_text(template.heading_label(Section.SKILLS))
        education = full.find_text(template.heading_label(Section.EDUCATION))
        assert skills is not None and education is not None
        assert skills.y == pytest.approx(education.y)

    @pytest.mark.parametrize(
        "empty",
        [{"skills": ()}, {"skills": (Skill(name="   ", category="technical"),)}],
        ids=["no-entries", "blank-entry"],
    )
    def test_empty_skills_emit_nothing(self, template_id: str, empty: dict) -> None:
        template = get_template(template_id)
        without = layout(_full().model_copy(update={"skills": ()}), template_id)
        page = layout(_full().model_copy(update=empty), template_id)

        assert page == without
        assert page.find_text(template.heading_label(Section.SKILLS)) is None
        if Section.PROJECTS in template.sections:
            full = layout(_full(), template_id)
            projects = page.find_text(template.heading_label(Section.PROJECTS))
            skills = full.find_text(template.heading_label(Section.SKILLS))
            assert projects is not None and skills is not None
            assert projects.y == pytest.approx(skills.y)

    def test_content_is_present(self, template_id: str) -> None:
        template = get_template(template_id)
        contents = " ".join(layout(_full(), template_id).text_contents())
        for needle in ("Jane", "Doe", "B.Tech in CS", "X College", "Python"):
            assert needle in contents
        assert ("Tracker" in contents) is (Section.PROJECTS in template.sections)
        assert ("Engineer who ships." in contents) is (Section.SUMMARY in template.sections)

    def test_everything_stays_on_the_page(self, template_id: str) -> None:
        page = layout(_full(), template_id)
        for primitive in page.primitives:
            if isinstance(primitive, Text):
                assert 0 <= primitive.x <= page.width
                assert 0 <= primitive.y <= page.height
            elif isinstance(primitive, Rect):
                assert primitive.x + primitive.w <= page.width + 1e-6
            elif isinstance(primitive, Line):
                assert max(primitive.x1, primitive.x2) <= page.width


@pytest.mark.parametrize("template_id", SUMMARY_TEMPLATES)
def test_long_summary_wraps_within_budget(template_id: str) -> None:
    template = get_template(template_id)
    summary = " ".join(["Delivered measurable improvements across teams."] * 8)
    page = layout(_jane().model_copy(update={"summary": summary}), template_id)

    texts = page.texts()
    heading = page.find_text(template.heading_label(Section.SUMMARY))
    assert heading is not None
    lines = texts[texts.index(heading) + 1 :]
    assert len(lines) >= 2
    measurer = TextMeasurer()
    for text in lines:
        width = measurer.width(
            text.content, size=text.font_size, bold=text.bold, font=text.font
        )
        assert width <= template.body_width + 1e-6
    ys = [t.y for t in lines]
    assert ys == sorted(ys)
    assert " ".join(t.content for t in lines) == summary


# ======================================================================
# Template specifics
# ======================================================================


class TestMinimal:
    def test_jane_doe_example(self) -> None:
        page = layout(_jane(), "minimal")
        measurer = TextMeasurer()

        name = page.find_text("Jane Doe")
        assert name is not None
        name_width = measurer.width("Jane Doe", size=24, bold=True)
        assert name.x + name_width / 2 == pytest.approx(page.width / 2)
        assert name.y == pytest.approx(30)

        title = page.find_text("Developer")
        assert title is not None
        title_width = measurer.width("Developer", size=14)
        assert title.x + title_width / 2 == pytest.approx(page.width / 2)

        contents = page.text_contents()
        for expected in ("Education", "B.Tech in CS", "X College", "2020 - 2024", "Skills"):
            assert expected in contents
        assert "Python" in contents
        assert "Projects" not in contents

        rules = [p for p in page.primitives if isinstance(p, Line)]
        assert len(rules) == 1
        assert rules[0].y1 > title.y

    def test_example_without_field_of_study(self) -> None:
        data = ResumeData.model_validate(
            {
                "personalInfo": {
                    "firstName": "Jane",
                    "lastName": "Doe",
                    "email": "jane@x.com",
                    "title": "Developer",
                },
                "education": [
                    {
                        "degree": "B.Tech",
                        "institution": "X College",
                        "startYear": 2020,
                        "endYear": 2024,
                    }
                ],
                "skills": [{"name": "Python"}],
                "projects": [],
                "summary": "",
            }
        )
        page = layout(data, "minimal")
        measurer = TextMeasurer()

        for content, size in (("Jane Doe", 24), ("Developer", 14)):
            text = page.find_text(content)
            assert text is not None
            width = measurer.width(content, size=size, bold=text.bold)
            assert text.x + width / 2 == pytest.approx(page.width / 2)

        contents = page.text_contents()
        for expected in ("Education", "B.Tech", "X College", "2020 - 2024", "Skills", "Python"):
            assert expected in contents
        assert not any(" in " in c for c in contents)
        assert "Projects" not in contents

    def test_has_no_colour_blocks(self) -> None:
        page = layout(_full(), "minimal")
        assert not any(isinstance(p, Rect) for p in page.primitives)


class TestModern:
    def test_blue_header_band(self) -> None:
        page = layout(_jane(), "modern")
        band = page.primitives[0]
        assert band == Rect(0, 0, 210.0, 40.0, (59, 130, 246))

        name = page.find_text("Jane Doe")
        assert name is not None
        assert (name.x, name.y, name.font_size) == (20, 25, 24)
        assert name.color == (255, 255, 255)

    def test_wrapped_name_grows_the_band(self) -> None:
        data = _jane().model_copy(
            update={
                "personal_info": PersonalInfo(
                    first_name="Maximiliana Evangelina",
                    last_name="Rutherford-Montgomery",
                    title="Developer",
                    email="jane@x.io",
                )
            }
        )
        page = layout(data, "modern")
        name_lines = [t for t in page.texts() if t.font_size == 24]
        assert len(name_lines) >= 2
        extra = 9 * (len(name_lines) - 1)

        band = page.primitives[0]
        assert isinstance(band, Rect)
        assert band.h == pytest.approx(40 + extra)
        title = page.find_text("Developer")
        assert title is not None
        assert title.y == pytest.approx(35 + extra)
        assert title.y > name_lines[-1].y
        assert all(t.y < band.h for t in [*name_lines, title])

    def test_contact_lines_are_labelled(self) -> None:
        page = layout(_jane(), "modern")
        email = page.find_text("Email: jane@x.io")
        assert email is not None
        assert email.y == pytest.approx(55)

    def test_education_without_years(self) -> None:
        data = _jane().model_copy(
            update={"education": (Education(degree="BSc", institution="Uni", start_year=2020),)}
        )
        contents = layout(data, "modern").text_contents()
        assert not any(" - " in c and c[:4].isdigit() for c in contents)


class TestCreative:
    def test_sidebar_and_split_name(self) -> None:
        page = layout(_jane(), "creative")
        assert page.primitives[0] == Rect(0, 0, 70.0, 297.0, (147, 51, 234))

        first = page.find_text("Jane")
        last = page.find_text("Doe")
        assert first is not None and last is not None
        assert (first.x, first.y) == (10, 30)
        assert (last.x, last.y) == (10, 45)

    def test_main_column_starts_right_of_sidebar(self) -> None:
        page = layout(_full(), "creative")
        heading = page.find_text("Contact")
        assert heading is not None
        assert heading.x == 80
        assert heading.font_size == 12
        assert page.find_text("jane@x.io") is not None

    def test_column_holds_contact_education_and_skills_only(self) -> None:
        page = layout(_full(), "creative")
        contents = page.text_contents()
        headings = [c for c in contents if c in ("Contact", "Education", "Skills")]
        assert headings == ["Contact", "Education", "Skills"]
        assert "Projects" not in contents
        assert "Summary" not in contents
        assert "Tracker" not in contents
        assert "Engineer who ships." not in contents


class TestTech:
    def test_prompt_style_headings(self) -> None:
        page = layout(_full(), "tech")
        heading = page.find_text("> skills")
        assert heading is not None
        assert heading.font == "courier"


class TestExecutive:
    def test_uppercase_headings(self) -> None:
        contents = layout(_full(), "executive").text_contents()
        assert "EDUCATION" in contents
        assert "PROJECTS" in contents


# ======================================================================
# Builder and metrics
# ======================================================================


class TestPageBuilder:
    def test_paragraph_moves_cursor_per_line(self) -> None:
        builder = PageBuilder()
        builder.y = 50
        count = builder.paragraph("one\ntwo", 20, 170, size=10, line_height=6)
        assert count == 2
        assert builder.y == 62
        assert [t.y for t in builder.build().texts()] == [50, 56]

    def test_explicit_y_leaves_cursor(self) -> None:
        builder = PageBuilder()
        builder.y = 10
        builder.paragraph("hello", 20, 170, size=10, y=100)
        assert builder.y == 10

    def test_blank_paragraph_emits_nothing(self) -> None:
        builder = PageBuilder()
        assert builder.paragraph("   ", 20, 170, size=10) == 0
        assert builder.build().primitives == ()
        assert builder.y == 0


class TestTextMeasurer:
    def test_wrap_breaks_at_spaces(self) -> None:
        measurer = TextMeasurer()
        text = "alpha beta gamma delta epsilon zeta eta theta"
        lines = measurer.wrap(text, 40, size=10)
        assert len(lines) >= 2
        assert " ".join(lines) == text
        assert all(measurer.width(line, size=10) <= 40 for line in lines)

    def test_long_word_is_split(self) -> None:
        measurer = TextMeasurer()
        word = "x" * 200
        lines = measurer.wrap(word, 30, size=10)
        assert "".join(lines) == word
        assert all(measurer.width(line, size=10) <= 30 for line in lines)

    def test_blank_input(self) -> None:
        assert TextMeasurer().wrap("  \n ", 50, size=10) == []
