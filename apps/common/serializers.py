from rest_framework import serializers


class DeleteConfirmSerializer(serializers.Serializer):
    """Typed acknowledgement for deleting a record."""

    confirm = serializers.CharField(required=False, allow_blank=True, default='')


def confirm_from_request(request):
    """Typed confirmation from a JSON object body, else the ``confirm`` query parameter."""
    body = request.data if isinstance(request.data, dict) else {}
    return body.get('confirm') or request.query_params.get('confirm', '')
