"""Resolve pom.xml properties through the maven-help-plugin."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

from nexus_upload.modules.publish.domain import PropertyUnresolved, ToolExecutionFailed
from nexus_upload.settings import Settings

HELP_PLUGIN_EVALUATE = "org.apache.maven.plugins:maven-help-plugin:3.1.0:evaluate"
UNRESOLVED_SENTINEL = "null object or invalid expression"


def parse_evaluation_output(output: str, expression: str, pom_file: str) -> str:
    """Return the evaluated value from the plugin's stdout.

    Maven may print warnings or download notes before the value even with
    ``-q``; only the last non-empty line is the result.
    """
    lines = [line.strip() for line in (output or "").splitlines() if line.strip()]
    if any(line.startswith(UNRESOLVED_SENTINEL) for line in lines):
        raise PropertyUnresolved(
            f"expression '{expression}' in file '{pom_file}' could not be resolved",
            expression=expression,
            pom_file=pom_file,
        )
    return lines[-1] if lines else ""


class PomPropertyEvaluator:
    """Runs one Maven process per property lookup; nothing is cached."""

    def __init__(
        self,
        *,
        executable: str = "mvn",
        project_settings_file: Optional[str] = None,
        global_settings_file: Optional[str] = None,
        m2_path: Optional[str] = None,
    ) -> None:
        self.executable = executable
        self.project_settings_file = project_settings_file
        self.global_settings_file = global_settings_file
        self.m2_path = m2_path
        self.log = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PomPropertyEvaluator":
        return cls(
            executable=settings.maven_executable,
            project_settings_file=settings.maven_project_settings_file,
            global_settings_file=settings.maven_global_settings_file,
            m2_path=settings.maven_m2_path,
        )

    def build_command(self, pom_file: str, expression: str) -> List[str]:
        command = [self.executable, "--file", pom_file, "--batch-mode"]
        if self.project_settings_file:
            command += ["--settings", self.project_settings_file]
        if self.global_settings_file:
            command += ["--global-settings", self.global_settings_file]
        if self.m2_path:
            command.append(f"-Dmaven.repo.local={self.m2_path}")
        command += [f"-Dexpression={expression}", "-DforceStdout", "-q", HELP_PLUGIN_EVALUATE]
        return command

    def evaluate(self, pom_file: str, expression: str) -> str:
        command = self.build_command(pom_file, expression)
        self.log.debug("Executing maven cmd=%s", command)
        try:
            completed = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
                text=True,
            )
        except OSError as exc:
            raise ToolExecutionFailed(
                f"failed to run '{self.executable}' for expression '{expression}' in file '{pom_file}': {exc}",
                expression=expression,
                pom_file=pom_file,
            ) from exc
        if completed.returncode != 0:
            raise ToolExecutionFailed(
                f"maven exited with {completed.returncode} evaluating '{expression}' in file '{pom_file}'",
                expression=expression,
                pom_file=pom_file,
            )
        value = parse_evaluation_output(completed.stdout, expression, pom_file)
        self.log.debug("Evaluated expression '%s' in file '%s' as '%s'", expression, pom_file, value)
        return value
