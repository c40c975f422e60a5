import json
import logging
from pathlib import Path

from rich.console import Console

from nestor.aws.iam import policy_document
from nestor.aws.policy import PolicySynthesizer
from nestor.config import load_policy_input
from nestor.exceptions import NestorError
from nestor.registry import ResourceRegistry
from nestor.reporter import Reporter

logger = logging.getLogger(__name__)

console = Console(highlight=False)
# Progress goes to stderr so the document on stdout can be piped.
progress_console = Console(stderr=True, highlight=False)


def run_policy(config_file: Path, pretty: bool = True) -> None:
    reporter = Reporter(
        "Synthesizing lambda policy", {"config": str(config_file)}, console=progress_console
    )
    task = reporter.start()
    try:
        policy_input = load_policy_input(config_file)
        registry = ResourceRegistry.from_config(policy_input.resources)
        task.log(
            "Input loaded",
            {
                "resources": str(len(registry)),
                "permissions": str(len(policy_input.permissions)),
            },
        )
        statements = PolicySynthesizer(registry, task=task.subtask("Statements")).synthesize(
            policy_input.permissions
        )
    except NestorError as e:
        logger.debug("Policy synthesis failed: %s", e)
        reporter.failure(e)
        raise SystemExit(1) from None

    reporter.success()
    document = policy_document(statements)
    console.out(json.dumps(document, indent=2 if pretty else None))
