ACTIVE_FLAG_VALUE = "1"

USE_BEDROCK = "CLAUDE_CODE_USE_BEDROCK"
USE_VERTEX = "CLAUDE_CODE_USE_VERTEX"
USE_FOUNDRY = "CLAUDE_CODE_USE_FOUNDRY"

# Highest priority first.
PROVIDER_FLAGS = (
    ("bedrock", USE_BEDROCK),
    ("vertex", USE_VERTEX),
    ("foundry", USE_FOUNDRY),
)

ANTHROPIC_API_KEY = "ANTHROPIC_API_KEY"
CLAUDE_CODE_OAUTH_TOKEN = "CLAUDE_CODE_OAUTH_TOKEN"
ANTHROPIC_BASE_URL = "ANTHROPIC_BASE_URL"
ANTHROPIC_AUTH_TOKEN = "ANTHROPIC_AUTH_TOKEN"

AWS_REGION = "AWS_REGION"
AWS_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
AWS_BEARER_TOKEN_BEDROCK = "AWS_BEARER_TOKEN_BEDROCK"

ANTHROPIC_VERTEX_PROJECT_ID = "ANTHROPIC_VERTEX_PROJECT_ID"
CLOUD_ML_REGION = "CLOUD_ML_REGION"

ANTHROPIC_FOUNDRY_RESOURCE = "ANTHROPIC_FOUNDRY_RESOURCE"
ANTHROPIC_FOUNDRY_BASE_URL = "ANTHROPIC_FOUNDRY_BASE_URL"

VARIABLE_ROLES = {
    USE_BEDROCK: "provider flag",
    USE_VERTEX: "provider flag",
    USE_FOUNDRY: "provider flag",
    ANTHROPIC_API_KEY: "direct credential",
    CLAUDE_CODE_OAUTH_TOKEN: "direct credential",
    ANTHROPIC_BASE_URL: "custom provider",
    ANTHROPIC_AUTH_TOKEN: "custom provider",
    AWS_REGION: "bedrock",
    AWS_ACCESS_KEY_ID: "bedrock",
    AWS_SECRET_ACCESS_KEY: "bedrock",
    AWS_BEARER_TOKEN_BEDROCK: "bedrock",
    ANTHROPIC_VERTEX_PROJECT_ID: "vertex",
    CLOUD_ML_REGION: "vertex",
    ANTHROPIC_FOUNDRY_RESOURCE: "foundry",
    ANTHROPIC_FOUNDRY_BASE_URL: "foundry",
}

FAILURE_HEADER = "Environment variable validation failed:"
BULLET_PREFIX = "  - "
