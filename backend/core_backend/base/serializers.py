from rest_framework import serializers


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer for model output.

    Subclasses may declare `select_related_fields` and
    `prefetch_related_fields` on their Meta; ReadOnlyBaseViewSet applies
    them to its queryset.
    """

    class Meta:
        select_related_fields = []
        prefetch_related_fields = []


class StrictInputSerializer(serializers.Serializer):
    """
    Input serializer that rejects payload keys it does not declare.

    Request bodies are validated at the boundary; unknown fields are an
    error rather than being silently dropped.
    """

    def to_internal_value(self, data):
        if hasattr(data, 'keys'):
            unknown = set(data.keys()) - set(self.fields.keys())
            if unknown:
                raise serializers.ValidationError(
                    {field: ["Unknown field."] for field in sorted(unknown)}
                )
        return super().to_internal_value(data)
