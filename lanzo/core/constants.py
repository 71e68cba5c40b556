"""Constants used throughout the Lanzo application."""


# Engine defaults
DEFAULT_ENGINE_PORT = 2375

# Seconds to wait before running a post-start command, slow entrypoints
# need time before they accept exec sessions.
POST_START_SETTLE_DELAY = 3.0

# HTTP server
DEFAULT_HTTP_HOST = "0.0.0.0"
DEFAULT_HTTP_PORT = 4000

# Provisioning
TERRAFORM_IMAGE = "hashicorp/terraform:light"
TERRAFORM_DIR_NAME = "terraform"
TERRAFORM_WORKDIR = "/workspace"
TERRAFORM_COMMANDS = {
    "init": ["init"],
    "apply": ["apply", "-auto-approve"],
    "destroy": ["destroy", "-auto-approve"],
}
TERRAFORM_ENV = [
    "AWS_ACCESS_KEY_ID=test",
    "AWS_SECRET_ACCESS_KEY=test",
    "AWS_DEFAULT_REGION=us-east-1",
]

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
POST_START_LOGGER = "lanzo.post_start"
