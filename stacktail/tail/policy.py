from typing import Optional

from stacktail.constants import STACK_RESOURCE_TYPE

from .models import StackEvent, StatusCategory, TailMode, classify_status


def is_stack_finished(event: Optional[StackEvent], stack_name: str) -> bool:
    """
    Whether the given event is the stack-level event that closes a stack operation, e.g. ``CREATE_COMPLETE`` or
    ``UPDATE_ROLLBACK_FAILED`` of the stack resource itself. Resource-level events never finish the stack.
    """
    if not event:
        return False
    if event.get("ResourceType") != STACK_RESOURCE_TYPE or event.get("LogicalResourceId") != stack_name:
        return False
    return classify_status(event.get("ResourceStatus")) is not StatusCategory.IN_PROGRESS


def should_continue(mode: TailMode, cursor: Optional[StackEvent], stack_name: str) -> bool:
    """
    Decides, after a cycle has been rendered, whether another poll should happen.

    :param mode: the tail mode selected at start
    :param cursor: the newest event shown so far
    :param stack_name: name of the tailed stack
    :return: True to poll again, False to stop
    """
    if mode is TailMode.FOLLOW:
        return True
    if mode is TailMode.DIE_ON_COMPLETION:
        return not is_stack_finished(cursor, stack_name)
    return False
