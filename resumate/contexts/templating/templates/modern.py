"""
Modern template: sidebar with identity, contact and skills; main column with
summary, experience, projects, and an education/skills grid.

Accent color goes on section dividers, company and institution names, and the
skill badge background. The skills block appears both in the sidebar and in
the main grid, matching the published layout.
"""

from typing import List

from resumate.contexts.templating.formatting import display_name, summary_title
from resumate.contexts.templating.rendered_tree import Node, section
from resumate.contexts.templating.resume_data_structure import ResumeDocument
from resumate.contexts.templating.templates.base import ResumeTemplate, compact

HEADINGS = {
    "experience": "Experience",
    "project": "Projects",
    "education": "Education",
    "skills": "Skills",
}

BADGE_TEXT_COLOR = "#FFFFFF"


class ModernTemplate(ResumeTemplate):
    name = "modern"

    def build(self, document: ResumeDocument, accent: str, sections: List[str]) -> Node:
        return Node(
            "div",
            role="resume",
            attrs={"data-template": self.name},
            children=[
                self._sidebar(document, accent, sections),
                self._main(document, accent, sections),
            ],
        )

    def _heading(self, key: str, accent: str) -> Node:
        return Node(
            "h3",
            role="heading",
            text=HEADINGS[key],
            style={"border-bottom": f"2px solid {accent}"},
        )

    def _skills(self, document: ResumeDocument, accent: str, tag: str) -> Node:
        badges = self.skill_badges(
            document, {"background-color": accent, "color": BADGE_TEXT_COLOR}
        )
        return section(
            "skills",
            self._heading("skills", accent),
            Node("div", role="badges", children=badges),
            tag=tag,
        )

    def _sidebar(self, document: ResumeDocument, accent: str, sections: List[str]) -> Node:
        info = document.personal_info
        identity = Node(
            "div",
            role="identity",
            children=compact(
                Node("h1", role="name", text=display_name(document)),
                Node("p", role="headline", text=info.headline) if info and info.headline else None,
            ),
        )
        contact = Node(
            "div",
            role="contact-block",
            children=[
                Node("h3", role="subheading", text="Contact"),
                Node("div", role="contact-list", children=self.contact_items(document)),
            ],
        )
        skills = self._skills(document, accent, tag="div") if "skills" in sections else None
        # The sidebar carries the header block (name and contact details)
        return Node(
            "aside",
            role="header",
            attrs={"aria-label": "Contact and skills"},
            children=compact(identity, contact, skills),
        )

    def _main(self, document: ResumeDocument, accent: str, sections: List[str]) -> Node:
        children = []

        title = summary_title(document)
        intro = compact(
            Node("h2", role="title", text=title) if title else None,
            section("summary", self.summary_body(document), tag="div")
            if "summary" in sections
            else None,
        )
        if intro:
            children.append(Node("header", role="main-header", children=intro))

        if "experience" in sections:
            children.append(
                section(
                    "experience",
                    self._heading("experience", accent),
                    self._experience(document, accent),
                )
            )

        if "project" in sections:
            children.append(
                section("project", self._heading("project", accent), self._projects(document))
            )

        grid = compact(
            section("education", self._heading("education", accent), self._education(document, accent))
            if "education" in sections
            else None,
            self._skills(document, accent, tag="section") if "skills" in sections else None,
        )
        if grid:
            children.append(Node("div", role="grid", children=grid))

        return Node("main", role="main", children=children)

    def _experience(self, document: ResumeDocument, accent: str) -> Node:
        entries = []
        for entry in document.experience:
            parts = self.experience_parts(entry)
            parts["company"].style["color"] = accent
            entries.append(
                Node(
                    "div",
                    role="entry",
                    children=compact(
                        Node("div", role="entry-title", children=[parts["position"], parts["company"]]),
                        parts["dates"],
                        parts["description"],
                    ),
                )
            )
        return Node("div", role="entries", children=entries)

    def _projects(self, document: ResumeDocument) -> Node:
        entries = []
        for entry in document.project:
            parts = self.project_parts(entry)
            entries.append(Node("div", role="entry", children=compact(parts["name"], parts["description"])))
        return Node("div", role="entries", children=entries)

    def _education(self, document: ResumeDocument, accent: str) -> Node:
        entries = []
        for entry in document.education:
            parts = self.education_parts(entry)
            parts["institution"].style["color"] = accent
            entries.append(
                Node(
                    "div",
                    role="entry",
                    children=[
                        parts["degree"],
                        parts["institution"],
                        Node("div", role="entry-meta", children=compact(parts["graduation"], parts["gpa"])),
                    ],
                )
            )
        return Node("div", role="entries", children=entries)
