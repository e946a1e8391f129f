import pytest

from fakes import FakeEvaluator, maven_values
from nexus_upload.modules.publish.domain import (
    ArtifactDescription,
    ClassifierDescription,
    InvalidClassifier,
    PropertyUnresolved,
    PublishModule,
    ToolExecutionFailed,
    parse_classifiers,
)
from nexus_upload.modules.publish.service import ArtifactSetBuilder
from nexus_upload.settings import FinalNamePolicy


def _module(output_folder: str = "target") -> PublishModule:
    return PublishModule(
        descriptor_path="pom.xml",
        descriptor_type="pom",
        output_folder=output_folder,
        group_id="com.acme",
        artifact_id="core",
        version="2.0.0",
    )


def test_descriptor_and_primary_output():
    builder = ArtifactSetBuilder(FakeEvaluator(maven_values()))

    artifacts = builder.build(_module())

    assert artifacts == [
        ArtifactDescription(file="pom.xml", type="pom", classifier="", artifact_id="core"),
        ArtifactDescription(file="target/core-2.0.0.jar", type="jar", classifier="", artifact_id="core"),
    ]


def test_pom_packaging_publishes_descriptor_only():
    evaluator = FakeEvaluator(maven_values(overrides={"project.packaging": "pom"}))

    artifacts = ArtifactSetBuilder(evaluator).build(_module())

    assert [a.file for a in artifacts] == ["pom.xml"]
    assert ("pom.xml", "project.build.finalName") not in evaluator.calls


def test_empty_packaging_defaults_to_jar():
    evaluator = FakeEvaluator(maven_values(overrides={"project.packaging": ""}))

    artifacts = ArtifactSetBuilder(evaluator).build(_module())

    assert artifacts[1].file == "target/core-2.0.0.jar"
    assert artifacts[1].type == "jar"


def test_war_packaging_without_output_folder():
    evaluator = FakeEvaluator(maven_values(overrides={"project.packaging": "war", "project.build.finalName": "web"}))

    artifacts = ArtifactSetBuilder(evaluator).build(_module(output_folder=""))

    assert artifacts[1].file == "web.war"


def test_classifier_artifacts():
    classifiers = parse_classifiers('[{"classifier":"sources","type":"jar"},{"classifier":"javadoc","type":"jar"}]')

    artifacts = ArtifactSetBuilder(FakeEvaluator(maven_values())).build(_module(), classifiers=classifiers)

    assert artifacts[2:] == [
        ArtifactDescription(file="target/core-sources.jar", type="jar", classifier="sources", artifact_id="core"),
        ArtifactDescription(file="target/core-javadoc.jar", type="jar", classifier="javadoc", artifact_id="core"),
    ]


def test_invalid_classifier_adds_nothing():
    builder = ArtifactSetBuilder(FakeEvaluator(maven_values()))
    classifiers = [ClassifierDescription("sources", "jar"), ClassifierDescription("", "jar")]

    with pytest.raises(InvalidClassifier):
        builder.classifier_artifacts(_module(), classifiers)
    with pytest.raises(InvalidClassifier):
        builder.build(_module(), classifiers=[ClassifierDescription("sources", "")])


@pytest.mark.parametrize(
    "payload",
    [
        '[{"classifier":"sources"}]',
        '[{"classifier":"","type":"jar"}]',
        '[{"type":"jar"}]',
        '["sources"]',
        '{"classifier":"sources","type":"jar"}',
        "not json",
    ],
)
def test_parse_classifiers_rejects_malformed(payload):
    with pytest.raises(InvalidClassifier):
        parse_classifiers(payload)


def test_parse_classifiers_empty():
    assert parse_classifiers("") == []
    assert parse_classifiers("[]") == []


def test_final_name_lookup_failure_propagates():
    evaluator = FakeEvaluator(maven_values(overrides={"project.build.finalName": None}))

    with pytest.raises(PropertyUnresolved):
        ArtifactSetBuilder(evaluator).build(_module())


def test_empty_final_name_skips_output_in_strict_mode():
    evaluator = FakeEvaluator(maven_values(overrides={"project.build.finalName": ""}))

    artifacts = ArtifactSetBuilder(evaluator).build(_module())

    assert [a.file for a in artifacts] == ["pom.xml"]


def test_derive_policy_builds_maven_default_name():
    unresolved = FakeEvaluator(maven_values(overrides={"project.build.finalName": None}))
    empty = FakeEvaluator(maven_values(overrides={"project.build.finalName": ""}))

    for evaluator in (unresolved, empty):
        artifacts = ArtifactSetBuilder(evaluator, FinalNamePolicy.DERIVE).build(_module())
        assert artifacts[1].file == "target/core-2.0.0.jar"


def test_derive_policy_still_fails_when_maven_cannot_run():
    failure = ToolExecutionFailed("boom", expression="project.build.finalName", pom_file="pom.xml")
    evaluator = FakeEvaluator(maven_values(overrides={"project.build.finalName": failure}))

    with pytest.raises(ToolExecutionFailed):
        ArtifactSetBuilder(evaluator, FinalNamePolicy.DERIVE).build(_module())


def test_packaging_lookup_failure_propagates():
    evaluator = FakeEvaluator(maven_values(overrides={"project.packaging": None}))

    with pytest.raises(PropertyUnresolved):
        ArtifactSetBuilder(evaluator).build(_module())


def test_external_primary_output():
    module = PublishModule(
        descriptor_path="mta.yaml",
        descriptor_type="yaml",
        output_folder="",
        group_id="com.acme",
        artifact_id="app",
        version="1.2.3",
        packaging="mtar",
    )
    evaluator = FakeEvaluator({})

    artifacts = ArtifactSetBuilder(evaluator).build(module, primary_output="build/app.mtar")

    assert artifacts == [
        ArtifactDescription(file="mta.yaml", type="yaml", classifier="", artifact_id="app"),
        ArtifactDescription(file="build/app.mtar", type="mtar", classifier="", artifact_id="app"),
    ]
    assert evaluator.calls == []
