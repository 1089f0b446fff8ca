"""Tests for jira_describer.templates.builder."""

from pathlib import Path

import pytest

from jira_describer.exceptions import EmptyTemplateError, MissingRequiredSectionError
from jira_describer.models import SectionContent, TemplateSection
from jira_describer.templates import TemplateBuilder, load_sections, panel_titles


def _contents(sections, texts):
    return [SectionContent(section=s, content=t) for s, t in zip(sections, texts)]


class TestRender:
    def test_three_required_sections_render_in_order(self):
        sections = [
            TemplateSection(name="Context", required=True),
            TemplateSection(name="Description", required=True),
            TemplateSection(name="Acceptance criteria", required=True),
        ]
        builder = TemplateBuilder(sections)
        text = builder.render(_contents(sections, ["Needed for X", "Build Y", "1. Y works"]))

        assert text == (
            "{panel:title=Context|borderStyle=none|titleBGColor=#457b9d|bgColor=#dcf3f9}\n"
            "Needed for X\n"
            "{panel}\n"
            "{panel:title=Description|borderStyle=none|titleBGColor=#457b9d|bgColor=#dcf3f9}\n"
            "Build Y\n"
            "{panel}\n"
            "{panel:title=Acceptance criteria|borderStyle=none|titleBGColor=#457b9d|bgColor=#dcf3f9}\n"
            "1. Y works\n"
            "{panel}"
        )
        assert builder.validate(text) == []

    def test_uses_section_colours_and_trims_content(self, sections):
        builder = TemplateBuilder(sections)
        text = builder.render(_contents(sections, ["  why  \n", "what", "", "done"]))
        assert text.splitlines()[0] == (
            "{panel:title=Context|borderStyle=none|titleBGColor=#e76f51|bgColor=#fceae6}"
        )
        assert text.splitlines()[1] == "why"

    def test_empty_optional_section_is_skipped(self, sections):
        builder = TemplateBuilder(sections)
        text = builder.render(_contents(sections, ["why", "what", "   ", "done"]))
        assert panel_titles(text) == ["Context", "Description", "Acceptance criteria"]
        assert text.count("{panel}") == 3

    def test_empty_required_section_raises(self, sections):
        builder = TemplateBuilder(sections)
        with pytest.raises(MissingRequiredSectionError) as excinfo:
            builder.render(_contents(sections, ["why", "", "how", "done"]))
        assert excinfo.value.section_name == "Description"

    def test_all_empty_optional_raises_empty_template(self):
        section = TemplateSection(name="Notes")
        builder = TemplateBuilder([section])
        with pytest.raises(EmptyTemplateError):
            builder.render([SectionContent(section=section, content="")])

    def test_no_contents_raises_empty_template(self, sections):
        with pytest.raises(EmptyTemplateError):
            TemplateBuilder(sections).render([])

    def test_preview_returns_error_message(self, sections):
        builder = TemplateBuilder(sections)
        preview = builder.preview(_contents(sections, ["", "what", "", "done"]))
        assert preview.startswith("Error generating preview:")
        assert "Context" in preview


class TestValidate:
    def test_reports_missing_required_sections(self, sections):
        builder = TemplateBuilder(sections)
        text = builder.render(
            [SectionContent(section=sections[0], content="why")]
        )
        assert builder.validate(text) == ["Description", "Acceptance criteria"]

    def test_empty_text_misses_every_required_section(self, sections):
        assert TemplateBuilder(sections).validate("") == [
            "Context",
            "Description",
            "Acceptance criteria",
        ]

    def test_titles_recover_rendered_sections(self, sections):
        builder = TemplateBuilder(sections)
        text = builder.render(_contents(sections, ["a", "b", "c", "d"]))
        assert panel_titles(text) == [s.name for s in sections]


class TestSections:
    def test_bundled_sections_load_in_order(self):
        names = [s.name for s in load_sections()]
        assert names == ["Context", "Description", "Technical Requirements", "Acceptance criteria"]

    def test_bundled_required_flags(self):
        required = {s.name: s.required for s in load_sections()}
        assert required["Technical Requirements"] is False
        assert required["Acceptance criteria"] is True

    def test_default_builder_uses_bundled_sections(self):
        builder = TemplateBuilder()
        assert builder.get_section("Description") is not None
        assert builder.get_section("Missing") is None

    def test_missing_colours_get_defaults(self, tmp_path: Path):
        path = tmp_path / "sections.yml"
        path.write_text("- name: Notes\n", encoding="utf-8")
        (section,) = load_sections(path)
        assert section.required is False
        assert section.background_color == "#dcf3f9"
        assert section.title_background_color == "#457b9d"

    def test_duplicate_names_rejected(self, tmp_path: Path):
        path = tmp_path / "sections.yml"
        path.write_text("- name: A\n- name: A\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Duplicate"):
            load_sections(path)

    def test_non_list_file_rejected(self, tmp_path: Path):
        path = tmp_path / "sections.yml"
        path.write_text("name: A\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_sections(path)

    def test_sections_are_immutable(self, sections):
        with pytest.raises(Exception):
            sections[0].name = "Other"
