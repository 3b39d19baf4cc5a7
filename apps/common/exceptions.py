from rest_framework.exceptions import APIException

# Typed acknowledgement required before a record is removed
DELETE_CONFIRMATION = 'DELETE'


class DeleteNotConfirmedError(APIException):
    """Delete request lacks the typed confirmation."""
    status_code = 400
    default_detail = f'Type {DELETE_CONFIRMATION} to confirm removal.'
    default_code = 'delete_not_confirmed'


def require_delete_confirmation(confirm):
    """Raise DeleteNotConfirmedError unless ``confirm`` is exactly DELETE."""
    if confirm != DELETE_CONFIRMATION:
        raise DeleteNotConfirmedError()
