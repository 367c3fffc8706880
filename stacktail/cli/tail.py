import logging
import traceback

import click

from stacktail import config
from stacktail.aws.connect import ClientFactory
from stacktail.constants import (
    DEFAULT_INITIAL_EVENTS,
    MAX_INITIAL_EVENTS,
    MIN_INITIAL_EVENTS,
    VERSION,
)
from stacktail.exceptions import TailError
from stacktail.tail import StackEventFetcher, StackEventTailer, TailConfig
from stacktail.tail.render import EventRenderer, OutputRenderer

from .console import console, error_console
from .exceptions import CLIError

EPILOG = """
\b
Credentials:
  By default, the credentials configured on your machine are used (either
  from the "default" profile in ~/.aws/credentials or from the various
  AWS_* environment variables). To use a different profile, specify its
  name with --profile. To specify the key/secret manually, use the --key
  and --secret options.

\b
Examples:
  Print five previous events and successive events until the stack update is complete:
    tail-stack-events -f --die -n 5 -s my-stack

\b
  Print the last 20 events of a stack in the us-west-2 region:
    tail-stack-events -n 20 -s my-stack --region us-west-2

\b
  Use a different credentials profile from ~/.aws/credentials:
    tail-stack-events -s my-stack --profile my-profile
"""


class TailCommand(click.Command):
    """
    The click command used for ``tail-stack-events``. It implements global exception handling by:

    - Exiting with status 1 on usage errors (e.g., unknown options) instead of click's 2
    - Ignoring click exceptions (already handled)
    - Wrapping tailing errors and all unexpected exceptions in a CLIError (for a unified error message)
    """

    def parse_args(self, ctx: click.Context, args):
        try:
            return super(TailCommand, self).parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise

    def invoke(self, ctx: click.Context):
        try:
            return super(TailCommand, self).invoke(ctx)
        except click.exceptions.Exit:
            # raise Exit exceptions unmodified (e.g., raised on --help)
            raise
        except click.ClickException:
            # don't handle ClickExceptions, just reraise
            if ctx and ctx.params.get("debug"):
                click.echo(traceback.format_exc())
            raise
        except TailError as e:
            if ctx and ctx.params.get("debug"):
                click.echo(traceback.format_exc())
            raise CLIError.from_tail_error(e) from e
        except Exception as e:
            if ctx and ctx.params.get("debug"):
                click.echo(traceback.format_exc())
            raise CLIError(str(e)) from e


def create_fetcher(factory: ClientFactory, stack_name: str) -> StackEventFetcher:
    return StackEventFetcher(factory.cloudformation, stack_name)


def _setup_logging(debug: bool) -> None:
    from stacktail.logging.setup import setup_logging, setup_logging_from_config

    if debug:
        config.DEBUG = True
        setup_logging(logging.DEBUG)
    else:
        setup_logging_from_config()


@click.command(
    name="tail-stack-events",
    cls=TailCommand,
    epilog=EPILOG,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "show_default": True,
    },
)
@click.version_option(
    VERSION,
    "--version",
    "-v",
    message="tail-stack-events %(version)s",
    help="Show the version and exit",
)
@click.option("-s", "--stack-name", type=str, help="Name of the stack")
@click.option(
    "-n",
    "--number",
    type=click.IntRange(MIN_INITIAL_EVENTS, MAX_INITIAL_EVENTS, clamp=True),
    default=DEFAULT_INITIAL_EVENTS,
    help=f"Number of events to display initially (max {MAX_INITIAL_EVENTS})",
)
@click.option("--die", is_flag=True, help="Stop tailing when a stack completion event occurs")
@click.option(
    "-f",
    "--follow",
    is_flag=True,
    help='Like "tail -f", poll forever (--die is ignored if present)',
)
@click.option("--outputs", is_flag=True, help="Print the stack outputs after tailing is complete")
@click.option("--profile", type=str, help="Name of the credentials profile to use")
@click.option("--key", type=str, help="API key to use to connect to AWS")
@click.option("--secret", type=str, help="API secret to use to connect to AWS")
@click.option(
    "--region",
    type=str,
    help="The AWS region the stack is in (defaults to AWS_DEFAULT_REGION, then us-east-1)",
)
@click.option("--endpoint-url", type=str, help="Custom CloudFormation endpoint, e.g., of a local emulator")
@click.option("-d", "--debug", is_flag=True, help="Enable debug logging")
def tail_stack_events(
    stack_name: str,
    number: int,
    die: bool,
    follow: bool,
    outputs: bool,
    profile: str = None,
    key: str = None,
    secret: str = None,
    region: str = None,
    endpoint_url: str = None,
    debug: bool = False,
) -> None:
    """
    Tail the events of a CloudFormation stack.

    Prints the most recent events of the stack, oldest first. With --die or --follow, keeps polling and prints
    new events as they occur.
    """
    _setup_logging(debug)

    tail_config = TailConfig(
        stack_name=stack_name or "",
        initial_count=number,
        follow=follow,
        die_on_completion=die,
        print_outputs=outputs,
        poll_interval=config.TAIL_POLL_INTERVAL,
        min_delay=config.TAIL_MIN_DELAY,
    )

    if profile and (key or secret):
        error_console.print("both profile and key/secret given, ignoring key/secret")

    factory = ClientFactory(
        region_name=region,
        profile_name=profile,
        aws_access_key_id=key,
        aws_secret_access_key=secret,
        endpoint_url=endpoint_url,
    )
    fetcher = create_fetcher(factory, tail_config.stack_name)

    tailer = StackEventTailer(fetcher, EventRenderer(console).render, tail_config)
    tailer.run()

    if tail_config.print_outputs:
        OutputRenderer(console).render(fetcher.describe_outputs())
