"""Serializers for the sales operations API v1."""
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from challenges.models import Challenge
from commercial.models import Proposal
from performance.models import WeeklyPerformance

User = get_user_model()


def _run_model_clean(instance):
    try:
        instance.clean()
    except DjangoValidationError as exc:
        if hasattr(exc, 'error_dict'):
            raise serializers.ValidationError(exc.message_dict)
        raise serializers.ValidationError({'non_field_errors': exc.messages})


class EmployeeSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(source='get_full_name', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'email', 'first_name', 'last_name', 'full_name', 'role',
            'department', 'position', 'admission_date', 'is_active',
        ]
        read_only_fields = fields


class ProposalSerializer(serializers.ModelSerializer):
    """Proposal/contract; ``total_value`` defaults to monthly value x months."""

    closer_name = serializers.SerializerMethodField()
    sdr_name = serializers.SerializerMethodField()
    total_value = serializers.DecimalField(
        max_digits=16, decimal_places=2, required=False, allow_null=True,
    )

    class Meta:
        model = Proposal
        fields = [
            'id', 'client', 'monthly_value', 'months', 'total_value', 'status',
            'closing_date', 'lost_date', 'lost_reason',
            'closer', 'closer_name', 'sdr', 'sdr_name',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_closer_name(self, obj):
        if obj.closer_id:
            return obj.closer.get_full_name()
        return None

    def get_sdr_name(self, obj):
        if obj.sdr_id:
            return obj.sdr.get_full_name()
        return None

    def validate(self, attrs):
        candidate = Proposal()
        if self.instance is not None:
            for field in ('client', 'monthly_value', 'months', 'status', 'closing_date'):
                setattr(candidate, field, getattr(self.instance, field))
        for field, value in attrs.items():
            if field in ('client', 'monthly_value', 'months', 'status', 'closing_date'):
                setattr(candidate, field, value)
        _run_model_clean(candidate)

        # Recompute the default total when the inputs change and no total was sent.
        if attrs.get('total_value') is None and ('monthly_value' in attrs or 'months' in attrs):
            monthly_value = attrs.get('monthly_value', candidate.monthly_value)
            months = attrs.get('months', candidate.months)
            attrs['total_value'] = Decimal(monthly_value) * months
        elif 'total_value' in attrs and attrs['total_value'] is None:
            attrs.pop('total_value')
        return attrs


class WeeklyPerformanceSerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source='employee.get_full_name', read_only=True)
    employee_role = serializers.CharField(source='employee.role', read_only=True)

    class Meta:
        model = WeeklyPerformance
        fields = [
            'id', 'employee', 'employee_name', 'employee_role', 'week_ending_date',
            'education_points', 'proposals_presented', 'contracts_signed',
            'mql', 'visits_scheduled', 'total_points', 'updated_at',
        ]
        read_only_fields = fields


class WeeklyPerformanceUpsertSerializer(serializers.Serializer):
    """One (employee, week) cell of the weekly grid; ``total_points`` is derived."""

    employee = serializers.PrimaryKeyRelatedField(queryset=User.objects.all())
    week_ending_date = serializers.DateField()
    education_points = serializers.IntegerField(min_value=0, default=0)
    proposals_presented = serializers.IntegerField(min_value=0, default=0)
    contracts_signed = serializers.IntegerField(min_value=0, default=0)
    mql = serializers.IntegerField(min_value=0, default=0)
    visits_scheduled = serializers.IntegerField(min_value=0, default=0)


class ChallengeSerializer(serializers.ModelSerializer):
    participant_ids = serializers.ListField(
        child=serializers.UUIDField(), required=False, allow_empty=True,
    )

    class Meta:
        model = Challenge
        fields = [
            'id', 'title', 'description', 'start_date', 'end_date', 'prize',
            'target_type', 'target_value', 'status', 'participant_ids',
            'winner_ids', 'completion_date', 'created_at', 'updated_at',
        ]
        read_only_fields = [
            'id', 'status', 'winner_ids', 'completion_date', 'created_at', 'updated_at',
        ]

    def validate_participant_ids(self, value):
        unique = []
        for participant_id in value:
            if str(participant_id) not in unique:
                unique.append(str(participant_id))
        return unique

    def validate(self, attrs):
        candidate = Challenge(
            start_date=attrs.get('start_date', getattr(self.instance, 'start_date', None)),
            end_date=attrs.get('end_date', getattr(self.instance, 'end_date', None)),
            target_value=attrs.get('target_value', getattr(self.instance, 'target_value', None)),
        )
        _run_model_clean(candidate)
        return attrs


class ChallengeWinnersSerializer(serializers.Serializer):
    winner_ids = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)


class MonthlyGoalSerializer(serializers.Serializer):
    month = serializers.IntegerField(min_value=1, max_value=12)
    month_name = serializers.CharField(read_only=True)
    target_value = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=Decimal('0'),
    )


class ConfigurationSerializer(serializers.Serializer):
    config_type = serializers.CharField(read_only=True)
    config_data = serializers.JSONField()
