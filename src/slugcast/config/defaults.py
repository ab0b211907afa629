"""Default configuration values and file contents."""

from slugcast.config.schema import GlobalConfig
from slugcast.slug import DEFAULT_BASE_URL

DEFAULT_GLOBAL_CONFIG = GlobalConfig()

DEFAULT_CONFIG_CONTENT = f"""# slugcast configuration
version: "1"
log_level: WARNING

# Redirect endpoint that generated podcast slugs are appended to
base_url: {DEFAULT_BASE_URL}

# Default number of podcasts shown by `slugcast list`
list_limit: 10

completion:
  # claude or workers-ai
  provider: claude
  claude_model: claude-sonnet-4-5
  workers_ai_model: "@cf/meta/llama-3.1-8b-instruct"
  max_tokens: 400
  temperature: 0.7

slug:
  # Ask the completion service for a slug before deriving one locally
  use_llm: true
  # random: fresh descriptor per call; stable: same topic, same slug
  descriptor_mode: random

store:
  api_base: https://api.cloudflare.com/client/v4
  timeout_seconds: 30

recommendation:
  model: "@cf/meta/llama-3.1-8b-instruct"
  history_limit: 50
"""

DEFAULT_CREDENTIALS_CONTENT = """# Cloudflare credentials (encrypted)
# Managed by: slugcast config credentials
"""


def get_default_config_content() -> str:
    """Get default config.yaml content."""
    return DEFAULT_CONFIG_CONTENT


def get_default_credentials_content() -> str:
    """Get default credentials.yaml content."""
    return DEFAULT_CREDENTIALS_CONTENT
