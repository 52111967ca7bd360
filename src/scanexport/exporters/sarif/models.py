"""SARIF 2.1.0 object model.

A subset of the SARIF schema, enough to describe rules, results and their
locations. Models serialize with camelCase keys and drop unset fields.

Provides:
- SarifReport, Run, Tool, ToolComponent: Report containers
- ReportingDescriptor: A rule
- Result, Location, PhysicalLocation, ArtifactLocation, Region: A finding
- Message, MultiformatMessageString: Text payloads
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"


class SarifModel(BaseModel):
    """Base for SARIF objects: camelCase aliases, assignment validation."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class Message(SarifModel):
    text: str


class MultiformatMessageString(SarifModel):
    text: str
    markdown: str | None = None


class Region(SarifModel):
    start_line: int = Field(default=1, ge=1)
    start_column: int = Field(default=1, ge=1)
    end_line: int = Field(default=1, ge=1)
    end_column: int = Field(default=1, ge=1)


class ArtifactLocation(SarifModel):
    uri: str = ""


class PhysicalLocation(SarifModel):
    artifact_location: ArtifactLocation
    region: Region | None = None


class Location(SarifModel):
    message: Message | None = None
    physical_location: PhysicalLocation | None = None


class ReportingDescriptor(SarifModel):
    """A rule: the check definition results point at."""

    id: str = Field(min_length=1)
    short_description: MultiformatMessageString | None = None
    full_description: MultiformatMessageString | None = None
    help: MultiformatMessageString | None = None
    help_uri: str | None = None


class Result(SarifModel):
    rule_id: str = Field(min_length=1)
    level: str = Field(default="note", pattern="^(none|note|warning|error)$")
    message: Message
    locations: list[Location] = Field(default_factory=list)
    partial_fingerprints: dict[str, str] | None = None


class ToolComponent(SarifModel):
    name: str
    information_uri: str | None = None
    rules: list[ReportingDescriptor] = Field(default_factory=list)


class Tool(SarifModel):
    driver: ToolComponent


class Run(SarifModel):
    """One execution's rules and results."""

    tool: Tool
    results: list[Result] = Field(default_factory=list)

    @classmethod
    def new(cls, tool_name: str, information_uri: str) -> "Run":
        """Create an empty run for the named tool."""
        return cls(tool=Tool(driver=ToolComponent(name=tool_name, information_uri=information_uri)))

    @property
    def rules(self) -> list[ReportingDescriptor]:
        return self.tool.driver.rules

    def add_rule(self, rule: ReportingDescriptor) -> ReportingDescriptor:
        """Add a rule, replacing an existing rule with the same id in place."""
        rules = self.tool.driver.rules
        for index, existing in enumerate(rules):
            if existing.id == rule.id:
                rules[index] = rule
                return rule
        rules.append(rule)
        return rule

    def add_result(self, result: Result) -> Result:
        self.results.append(result)
        return result


class SarifReport(SarifModel):
    """Top level SARIF log."""

    schema_uri: str = Field(default=SARIF_SCHEMA, alias="$schema")
    version: str = SARIF_VERSION
    runs: list[Run] = Field(default_factory=list)

    def add_run(self, run: Run) -> None:
        self.runs.append(run)

    def to_json(self, indent: int | None = 2) -> str:
        """Encode the report as SARIF JSON."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
