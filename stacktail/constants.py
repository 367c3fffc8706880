import stacktail

# stacktail version
VERSION = stacktail.__version__

# region used when neither --region nor AWS_DEFAULT_REGION is given
AWS_REGION_US_EAST_1 = "us-east-1"

# resource type of the synthetic event CloudFormation emits for the stack itself
STACK_RESOURCE_TYPE = "AWS::CloudFormation::Stack"

# prefix stripped from resource types when rendering
AWS_RESOURCE_TYPE_PREFIX = "AWS::"

# polling cadence (in seconds): one API call per interval on average, never closer than the min delay
DEFAULT_POLL_INTERVAL = 3.0
DEFAULT_MIN_DELAY = 0.1

# number of events shown on the first fetch, and the bounds of that number
DEFAULT_INITIAL_EVENTS = 5
MIN_INITIAL_EVENTS = 1
MAX_INITIAL_EVENTS = 100

TRUE_STRINGS = ("1", "true", "True")
FALSE_STRINGS = ("0", "false", "False")

LOG_LEVELS = ("debug", "info", "warn", "warning", "error")
