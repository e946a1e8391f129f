"""Constants shared across the publish domain."""

MTA_DESCRIPTOR = "mta.yaml"
POM_DESCRIPTOR = "pom.xml"

DESCRIPTOR_TYPE_YAML = "yaml"
DESCRIPTOR_TYPE_POM = "pom"

PACKAGING_POM = "pom"
PACKAGING_DEFAULT = "jar"
PACKAGING_MTAR = "mtar"

APPLICATION_MODULE = "application"
TARGET_FOLDER = "target"

# commonPipelineEnvironment locations written by earlier pipeline steps
PIPELINE_ENV_SCOPE = ".pipeline/commonPipelineEnvironment"
PIPELINE_ENV_CONFIG_SCOPE = ".pipeline/commonPipelineEnvironment/configuration"
PIPELINE_ARTIFACT_ID_KEY = "artifactId"
PIPELINE_MTAR_FILE_KEY = "mtarFilePath"
