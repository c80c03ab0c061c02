"""
Classic template: single column with a centered header.

Accent color goes on the name, section headings, the header rule, the
experience timeline border, and skill badge text.
"""

from typing import List

from resumate.contexts.templating.formatting import display_name
from resumate.contexts.templating.rendered_tree import Node, section
from resumate.contexts.templating.resume_data_structure import ResumeDocument
from resumate.contexts.templating.templates.base import ResumeTemplate, compact

HEADINGS = {
    "summary": "PROFESSIONAL SUMMARY",
    "experience": "PROFESSIONAL EXPERIENCE",
    "project": "PROJECTS",
    "education": "EDUCATION",
    "skills": "CORE SKILLS",
}


class ClassicTemplate(ResumeTemplate):
    name = "classic"

    def build(self, document: ResumeDocument, accent: str, sections: List[str]) -> Node:
        builders = {
            "summary": lambda: [self.summary_body(document)],
            "experience": lambda: [self._experience(document, accent)],
            "project": lambda: [self._projects(document)],
            "education": lambda: [self._education(document)],
            "skills": lambda: [
                Node(
                    "div",
                    role="badges",
                    children=self.skill_badges(document, {"color": accent}),
                )
            ],
        }

        children = [self._header(document, accent)]
        for key in sections:
            heading = Node("h2", role="heading", text=HEADINGS[key], style={"color": accent})
            children.append(section(key, heading, *builders[key]()))

        return Node("div", role="resume", attrs={"data-template": self.name}, children=children)

    def _header(self, document: ResumeDocument, accent: str) -> Node:
        return Node(
            "header",
            role="header",
            style={"border-bottom": f"2px solid {accent}", "text-align": "center"},
            children=[
                Node("h1", role="name", text=display_name(document), style={"color": accent}),
                Node("div", role="contact-list", children=self.contact_items(document)),
            ],
        )

    def _experience(self, document: ResumeDocument, accent: str) -> Node:
        entries = []
        for entry in document.experience:
            parts = self.experience_parts(entry)
            entries.append(
                Node(
                    "div",
                    role="entry",
                    style={"border-left": f"2px solid {accent}"},
                    children=compact(
                        Node("div", role="entry-title", children=[parts["position"], parts["company"]]),
                        parts["dates"],
                        parts["description"],
                    ),
                )
            )
        return Node("div", role="entries", children=entries)

    def _projects(self, document: ResumeDocument) -> Node:
        items = []
        for entry in document.project:
            parts = self.project_parts(entry)
            items.append(Node("li", role="entry", children=compact(parts["name"], parts["description"])))
        return Node("ul", role="entries", children=items)

    def _education(self, document: ResumeDocument) -> Node:
        entries = []
        for entry in document.education:
            parts = self.education_parts(entry)
            entries.append(
                Node(
                    "div",
                    role="entry",
                    children=[
                        Node(
                            "div",
                            role="entry-title",
                            children=compact(parts["degree"], parts["institution"], parts["gpa"]),
                        ),
                        parts["graduation"],
                    ],
                )
            )
        return Node("div", role="entries", children=entries)
