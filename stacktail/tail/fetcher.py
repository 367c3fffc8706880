import logging

from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from stacktail.exceptions import ProviderError

from .models import StackEvents, StackOutputs

LOG = logging.getLogger(__name__)


class StackEventFetcher:
    """
    Reads the event log and the outputs of one CloudFormation stack. Errors are raised as ``ProviderError`` and
    are not retried.
    """

    def __init__(self, client: BaseClient, stack_name: str):
        self.client = client
        self.stack_name = stack_name

    def fetch(self) -> StackEvents:
        """
        Fetch the most recent page of stack events, newest first, exactly as returned by DescribeStackEvents.

        :return: the list of stack events
        :raises ProviderError: if the API call fails
        """
        try:
            response = self.client.describe_stack_events(StackName=self.stack_name)
        except (ClientError, BotoCoreError) as e:
            raise ProviderError.from_boto_error("DescribeStackEvents", e) from e

        events = response.get("StackEvents") or []
        LOG.debug("Fetched %d events of stack %s", len(events), self.stack_name)
        return events

    def describe_outputs(self) -> StackOutputs:
        """
        Fetch the outputs of the stack.

        :return: the list of stack outputs, empty if the stack has none
        :raises ProviderError: if the API call fails
        """
        try:
            response = self.client.describe_stacks(StackName=self.stack_name)
        except (ClientError, BotoCoreError) as e:
            raise ProviderError.from_boto_error("DescribeStacks", e) from e

        stacks = response.get("Stacks") or []
        if not stacks:
            return []
        return stacks[0].get("Outputs") or []
