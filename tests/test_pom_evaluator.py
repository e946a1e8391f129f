import subprocess

import pytest

from nexus_upload.modules.publish.domain import PropertyUnresolved, ToolExecutionFailed
from nexus_upload.modules.publish.maven import PomPropertyEvaluator, parse_evaluation_output
from nexus_upload.settings import Settings


class Completed:
    def __init__(self, stdout: str = "", returncode: int = 0) -> None:
        self.stdout = stdout
        self.returncode = returncode


def _fake_run(outputs, calls):
    def fake_run(cmd, *_, **kwargs):
        calls.append((cmd, kwargs))
        result = outputs.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    return fake_run


def test_evaluate_runs_help_plugin(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed("com.acme")], calls))

    value = PomPropertyEvaluator().evaluate("application/pom.xml", "project.groupId")

    assert value == "com.acme"
    cmd, kwargs = calls[0]
    assert cmd[:4] == ["mvn", "--file", "application/pom.xml", "--batch-mode"]
    assert "-Dexpression=project.groupId" in cmd
    assert "-DforceStdout" in cmd and "-q" in cmd
    assert cmd[-1] == "org.apache.maven.plugins:maven-help-plugin:3.1.0:evaluate"
    assert kwargs["stdout"] == subprocess.PIPE
    assert kwargs["stderr"] == subprocess.DEVNULL


def test_evaluate_passes_maven_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed("1.0.0")], calls))
    settings = Settings(
        _env_file=None,
        maven_executable="/opt/maven/bin/mvn",
        maven_project_settings_file="settings.xml",
        maven_global_settings_file="/etc/maven/settings.xml",
        maven_m2_path=".m2",
    )

    PomPropertyEvaluator.from_settings(settings).evaluate("pom.xml", "project.version")

    cmd = calls[0][0]
    assert cmd[0] == "/opt/maven/bin/mvn"
    assert cmd[cmd.index("--settings") + 1] == "settings.xml"
    assert cmd[cmd.index("--global-settings") + 1] == "/etc/maven/settings.xml"
    assert "-Dmaven.repo.local=.m2" in cmd


def test_evaluate_ignores_preamble(monkeypatch):
    output = "Picked up JAVA_TOOL_OPTIONS: -Xmx1g\n[WARNING] something odd\n\n2.0.0\n"
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed(output)], []))

    assert PomPropertyEvaluator().evaluate("pom.xml", "project.version") == "2.0.0"


def test_empty_output_is_empty_value(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed("")], []))

    assert PomPropertyEvaluator().evaluate("pom.xml", "project.packaging") == ""


def test_unresolved_expression(monkeypatch):
    output = "null object or invalid expression"
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed(output)], []))

    with pytest.raises(PropertyUnresolved) as excinfo:
        PomPropertyEvaluator().evaluate("pom.xml", "project.nothing")

    assert not isinstance(excinfo.value, ToolExecutionFailed)
    assert excinfo.value.expression == "project.nothing"
    assert excinfo.value.pom_file == "pom.xml"
    assert "project.nothing" in str(excinfo.value)


def test_non_zero_exit_is_tool_failure(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed("", returncode=1)], []))

    with pytest.raises(ToolExecutionFailed) as excinfo:
        PomPropertyEvaluator().evaluate("pom.xml", "project.version")

    assert not isinstance(excinfo.value, PropertyUnresolved)
    assert excinfo.value.pom_file == "pom.xml"


def test_missing_executable_is_tool_failure(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _fake_run([FileNotFoundError("mvn")], []))

    with pytest.raises(ToolExecutionFailed):
        PomPropertyEvaluator().evaluate("pom.xml", "project.version")


def test_every_lookup_runs_maven(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", _fake_run([Completed("a"), Completed("a")], calls))
    evaluator = PomPropertyEvaluator()

    evaluator.evaluate("pom.xml", "project.artifactId")
    evaluator.evaluate("pom.xml", "project.artifactId")

    assert len(calls) == 2


def test_parse_output_detects_sentinel_after_preamble():
    with pytest.raises(PropertyUnresolved):
        parse_evaluation_output("[INFO] noise\nnull object or invalid expression\n", "x", "pom.xml")
