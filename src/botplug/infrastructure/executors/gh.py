"""GitHub executor: creates a GitHub issue for a Kubernetes resource.

Usage in chat::

    gh create issue pod/web-7d9f -n production

Configuration::

    github:
      token: ghp_...
      repository: org/repo
      issueTemplate: |
        ## Description
        `{{ type }}` in namespace `{{ namespace }}` malfunctions.
        {{ code("yaml", version) }}
        {{ code("text", logs) }}

The template is rendered with Jinja2. ``code(syntax, text)`` wraps ``text``
in a fenced code block.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass

import jinja2
import structlog
from pydantic import BaseModel, ConfigDict, Field

from botplug import __version__
from botplug.core.domain.errors import ConfigParseError, UpstreamCallError
from botplug.core.domain.plugin import ExecuteInput, ExecuteOutput, MetadataOutput
from botplug.infrastructure.config import merge_executor_configs
from botplug.infrastructure.executors.base import CommandParser, HelpUnimplemented, split_command
from botplug.infrastructure.github_client import GitHubClient
from botplug.infrastructure.shell import execute_command

logger = structlog.get_logger(__name__)

PLUGIN_NAME = "gh"
DESCRIPTION = "GitHub creates an issue on GitHub for a related Kubernetes resource."
LOGS_TAIL_LINES = 150
DEFAULT_NAMESPACE = "default"

DEFAULT_ISSUE_TEMPLATE = """\
## Description

This issue refers to the `{{ type }}` resource in the `{{ namespace }}` namespace.

### Troubleshooting

{{ code("bash", logs) }}

### Cluster details

{{ code("yaml", version) }}
"""


class GitHubSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str | None = Field(None, description="GitHub access token.")
    repository: str | None = Field(None, description="Target repository, e.g. 'org/repo'.")
    issue_template: str | None = Field(
        None, alias="issueTemplate", description="Jinja2 template of the issue body."
    )


class GhConfig(BaseModel):
    """GitHub executor configuration."""

    model_config = ConfigDict(populate_by_name=True)

    github: GitHubSettings = Field(default_factory=GitHubSettings)


@dataclass(frozen=True)
class CreateIssueCommand:
    type: str
    namespace: str = ""


@dataclass(frozen=True)
class IssueDetails:
    """Everything known about the resource an issue is filed for."""

    type: str
    namespace: str
    logs: str
    version: str


def _build_parser() -> CommandParser:
    parser = CommandParser(prog=PLUGIN_NAME)
    groups = parser.add_subparsers(dest="group")
    create = groups.add_parser("create")
    resources = create.add_subparsers(dest="resource")
    issue = resources.add_parser("issue")
    issue.add_argument("type", nargs="?", default="")
    issue.add_argument("-n", "--namespace", default="")
    return parser


def parse_command(command: str) -> CreateIssueCommand | None:
    """Parse ``gh create issue KIND/NAME [-n NS]``.

    Returns:
        The parsed command, or None when no ``create issue`` subcommand was given.

    Raises:
        InvalidCommandError: If the command line is malformed.
    """
    args = _build_parser().parse_args(split_command(PLUGIN_NAME, command))
    if args.group != "create" or getattr(args, "resource", None) != "issue":
        return None
    return CreateIssueCommand(type=args.type, namespace=args.namespace)


def render_issue_body(template: str, details: IssueDetails) -> str:
    """Render the issue body template with the collected details.

    Raises:
        ConfigParseError: If the template is invalid or references unknown values.
    """
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.globals["code"] = lambda syntax, text: f"\n```{syntax}\n{text}\n```\n"

    try:
        tmpl = env.from_string(template)
    except jinja2.TemplateSyntaxError as exc:
        raise ConfigParseError(f"while creating template: {exc}") from exc

    try:
        return tmpl.render(
            type=details.type,
            namespace=details.namespace,
            logs=details.logs,
            version=details.version,
        )
    except jinja2.TemplateError as exc:
        raise ConfigParseError(f"while generating body: {exc}") from exc


async def get_issue_details(namespace: str, name: str) -> IssueDetails:
    """Collect logs and cluster version for the given resource.

    Raises:
        UpstreamCallError: If a kubectl call fails.
    """
    namespace = namespace or DEFAULT_NAMESPACE
    try:
        logs = await execute_command(
            f"kubectl logs {shlex.quote(name)} -n {shlex.quote(namespace)} --tail {LOGS_TAIL_LINES}"
        )
    except UpstreamCallError as exc:
        raise UpstreamCallError(f"while getting logs: {exc.message}", details=exc.details) from exc
    try:
        version = await execute_command("kubectl version -o yaml")
    except UpstreamCallError as exc:
        raise UpstreamCallError(
            f"while getting version: {exc.message}", details=exc.details
        ) from exc

    return IssueDetails(type=name, namespace=namespace, logs=logs, version=version)


class GhExecutor(HelpUnimplemented):
    """Files GitHub issues with logs and cluster details attached."""

    async def metadata(self) -> MetadataOutput:
        return MetadataOutput(
            version=__version__,
            description=DESCRIPTION,
            json_schema=GhConfig.model_json_schema(by_alias=True),
        )

    async def execute(self, execute_input: ExecuteInput) -> ExecuteOutput:
        """Create an issue for the resource named in the command."""
        cfg = merge_executor_configs(execute_input.configs, GhConfig)

        cmd = parse_command(execute_input.command)
        if cmd is None:
            return ExecuteOutput(data=f"Usage: {PLUGIN_NAME} create issue KIND/NAME")

        details = await get_issue_details(cmd.namespace, cmd.type)
        body = render_issue_body(cfg.github.issue_template or DEFAULT_ISSUE_TEMPLATE, details)

        client = GitHubClient(
            token=cfg.github.token or "",
            repository=cfg.github.repository or "",
        )
        issue_url = await client.create_issue(
            title=f"The `{cmd.type}` malfunctions", body=body, labels=["bug"]
        )

        logger.info("gh.issue.created", resource=cmd.type, namespace=details.namespace)
        return ExecuteOutput(
            data=f"New issue created successfully! 🎉\n\nIssue URL: {issue_url}"
        )
