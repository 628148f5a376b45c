"""Owner-only list loading shared by the list edit use cases."""

from uuid import UUID

from topmeup.domain.error import ValidationError
from topmeup.domain.model import TopList
from topmeup.domain.service import TopListService
from topmeup.domain.value import ListId, UserId


async def load_owned_list(
    top_list_service: TopListService, list_id: str, user_id: str
) -> TopList:
    """Load a list the requesting user is about to edit.

    Raises:
        ValidationError: If list ID is malformed
        NotFoundError: If list not found
        NotAuthorizedError: If user does not own the list
    """
    try:
        parsed_id = ListId(UUID(list_id))
    except ValueError:
        raise ValidationError(f"Invalid list ID format: {list_id}")

    return await top_list_service.get_owned_list(parsed_id, UserId(UUID(user_id)))
