# backend/newsrag/chat/serializers.py
"""
Chat API serializers
"""
from rest_framework import serializers


class ChatRequestSerializer(serializers.Serializer):
    """
    Serializer for one chat turn request

    The query is passed on exactly as sent (no trimming) so history and
    cache keys see the user's text. topK falls back to the configured
    default when omitted.
    """

    query = serializers.CharField(max_length=4000, trim_whitespace=False)
    topK = serializers.IntegerField(min_value=1, max_value=50, required=False)

    def validate_query(self, value):
        # CharField coerces numbers to str; only JSON strings are queries
        if not isinstance(self.initial_data.get("query"), str):
            raise serializers.ValidationError("Query must be a string.")
        if not value.strip():
            raise serializers.ValidationError("This field may not be blank.")
        return value


class TurnSerializer(serializers.Serializer):
    """
    Read-only view of a stored turn, extra fields included
    """

    def to_representation(self, instance):
        return instance.to_dict()


class HistorySerializer(serializers.Serializer):
    sessionId = serializers.CharField()
    history = TurnSerializer(many=True)


class ChatResponseSerializer(serializers.Serializer):
    sessionId = serializers.CharField()
    query = serializers.CharField()
    answer = serializers.CharField()
    history = TurnSerializer(many=True)
