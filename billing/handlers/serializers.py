"""Serializers for transforming statement data to API responses."""

from rest_framework import serializers


class StatementLineSerializer(serializers.Serializer):
    """Serializer for a priced performance line."""

    play_id = serializers.CharField()
    play_name = serializers.CharField()
    genre = serializers.SerializerMethodField()
    audience = serializers.IntegerField()
    amount = serializers.IntegerField()
    credits = serializers.IntegerField()

    def get_genre(self, line) -> str:
        return line.genre.value


class StatementSerializer(serializers.Serializer):
    """Serializer for StatementData plus its rendered text.

    Expects ``context["invoice_id"]`` and ``context["text"]``.
    """

    invoice_id = serializers.SerializerMethodField()
    customer = serializers.CharField()
    lines = StatementLineSerializer(many=True)
    total_amount = serializers.IntegerField()
    total_credits = serializers.IntegerField()
    text = serializers.SerializerMethodField()

    def get_invoice_id(self, data) -> int:
        return self.context["invoice_id"]

    def get_text(self, data) -> str:
        return self.context["text"]


class ErrorSerializer(serializers.Serializer):
    """Serializer for DomainError responses."""

    code = serializers.SerializerMethodField()
    message = serializers.CharField()

    def get_code(self, error) -> str:
        return error.code.value
