"""Markdown rendering of finding events with Jinja2 templates.

The rendered text becomes the help text of SARIF rules, so it has to read
well both in code scanning UIs and in plain markdown viewers.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from scanexport.core.output import FindingEvent


def _table_cell(value: str) -> str:
    """Escape a value for use inside a markdown table cell."""
    return str(value).replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")


class MarkdownRenderer:
    """Render finding events into long form markdown descriptions."""

    def __init__(self, template_dir: str | None = None):
        """Initialize renderer with Jinja2 templates.

        Args:
            template_dir: Path to template directory (defaults to ./templates/)
        """
        if template_dir is None:
            template_dir = str(Path(__file__).parent / "templates")
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["cell"] = _table_cell

    def render(self, event: FindingEvent) -> str:
        """Render a single finding as markdown.

        Args:
            event: Finding to describe

        Returns:
            Markdown string with details, template information and evidence
        """
        template = self.env.get_template("finding.md.j2")
        return template.render(event=event, template_info=self._template_info(event))

    def _template_info(self, event: FindingEvent) -> list[tuple[str, str]]:
        """Rows of the template information table, skipping empty values."""
        info = event.info
        rows = [
            ("Name", info.name or ""),
            ("Authors", ", ".join(info.author)),
            ("Tags", ", ".join(info.tags)),
            ("Severity", info.severity or ""),
            ("Description", info.description or ""),
            ("Remediation", info.remediation or ""),
        ]
        return [(key, value) for key, value in rows if value]


_default_renderer: MarkdownRenderer | None = None


def markdown_description(event: FindingEvent) -> str:
    """Render a finding with the bundled templates.

    Example:
        >>> markdown_description(event).splitlines()[0]
        '**Details**: **cve-2021-1234** matched at example.com'
    """
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MarkdownRenderer()
    return _default_renderer.render(event)
