"""ViewSets and API views for the sales operations API v1."""
import logging
import uuid

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Case, IntegerField, Value, When
from django.utils import timezone

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from challenges.models import Challenge
from challenges.services import challenge_progress, evaluate_challenges
from commercial.bonus_fund import current_bonus_fund
from commercial.commissions import (
    load_tiers,
    month_total,
    monthly_commissions,
    open_contracts,
    open_contracts_potential,
    progress_info,
)
from commercial.models import Proposal
from configuration.services import (
    EDITABLE_TYPES,
    OPERATIONAL_COSTS,
    get_config,
    get_operational_costs,
    set_config,
)
from goals.services import (
    annual_goal,
    commercial_goal_report,
    get_monthly_goals,
    month_goal,
    update_monthly_goals,
)
from performance.models import WeeklyPerformance
from performance.services import employee_of_month, upsert_weekly_performance, week_columns

from api.v1.pagination import StandardResultsSetPagination
from api.v1.permissions import IsAdmin, IsAdminOrReadOnly
from api.v1.serializers import (
    ChallengeSerializer,
    ChallengeWinnersSerializer,
    ConfigurationSerializer,
    EmployeeSerializer,
    MonthlyGoalSerializer,
    ProposalSerializer,
    WeeklyPerformanceSerializer,
    WeeklyPerformanceUpsertSerializer,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def _year_param(request):
    raw = request.query_params.get('year')
    if not raw:
        return timezone.localdate().year
    try:
        year = int(raw)
    except (TypeError, ValueError):
        raise ValidationError({'year': 'Ano inválido.'})
    if not 2000 <= year <= 2100:
        raise ValidationError({'year': 'Ano fora do intervalo permitido.'})
    return year


def _month_param(request):
    raw = request.query_params.get('month')
    if not raw:
        return timezone.localdate().month
    try:
        month = int(raw)
    except (TypeError, ValueError):
        raise ValidationError({'month': 'Mês inválido.'})
    if not 1 <= month <= 12:
        raise ValidationError({'month': 'Mês deve estar entre 1 e 12.'})
    return month


def _as_drf_error(exc):
    if hasattr(exc, 'error_dict'):
        return ValidationError(exc.message_dict)
    return ValidationError({'detail': exc.messages})


# ---------------------------------------------------------------------------
# Employees & proposals
# ---------------------------------------------------------------------------

class EmployeeViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = EmployeeSerializer
    queryset = User.objects.all()
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['role', 'is_active', 'department']
    search_fields = ['first_name', 'last_name', 'email', 'position']
    ordering_fields = ['first_name', 'last_name', 'role', 'admission_date']
    pagination_class = StandardResultsSetPagination


class ProposalViewSet(viewsets.ModelViewSet):
    """
    Proposals and signed contracts.

    - list: filter by status, closer, sdr; ``year`` restricts to closings of that year
    - create/update: ``total_value`` defaults to monthly value x months
    """

    serializer_class = ProposalSerializer
    queryset = Proposal.objects.select_related('closer', 'sdr')
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['status', 'closer', 'sdr']
    search_fields = ['client', 'closer__first_name', 'sdr__first_name']
    ordering_fields = ['created_at', 'closing_date', 'total_value', 'monthly_value', 'client']
    pagination_class = StandardResultsSetPagination

    def get_queryset(self):
        qs = super().get_queryset()
        if self.request.query_params.get('year'):
            qs = qs.filter(closing_date__year=_year_param(self.request))
        return qs


# ---------------------------------------------------------------------------
# Weekly performance
# ---------------------------------------------------------------------------

class WeeklyPerformanceViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    Weekly performance grid.

    - list: filter by employee and ``year``
    - upsert: create or overwrite one or many (employee, week) records
    - weeks: week-ending dates shown as grid columns for ``year``
    - employee-of-month: monthly points ranking for ``year``/``month`` plus past winners
    """

    serializer_class = WeeklyPerformanceSerializer
    queryset = WeeklyPerformance.objects.select_related('employee')
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['employee', 'week_ending_date']
    ordering_fields = ['week_ending_date', 'total_points']
    pagination_class = StandardResultsSetPagination

    def get_queryset(self):
        qs = super().get_queryset()
        if self.request.query_params.get('year'):
            qs = qs.filter(week_ending_date__year=_year_param(self.request))
        return qs

    @action(detail=False, methods=['post'], url_path='upsert')
    def upsert(self, request):
        many = isinstance(request.data, list)
        serializer = WeeklyPerformanceUpsertSerializer(data=request.data, many=many)
        serializer.is_valid(raise_exception=True)

        rows = serializer.validated_data if many else [serializer.validated_data]
        records = []
        for row in rows:
            counters = dict(row)
            employee = counters.pop('employee')
            week_ending_date = counters.pop('week_ending_date')
            records.append(upsert_weekly_performance(employee, week_ending_date, counters))

        data = WeeklyPerformanceSerializer(records, many=True).data
        return Response(data if many else data[0], status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], url_path='weeks')
    def weeks(self, request):
        year = _year_param(request)
        records = WeeklyPerformance.objects.filter(week_ending_date__year=year).only('week_ending_date')
        columns = week_columns(records, year, timezone.localdate())
        return Response({'year': year, 'weeks': [week.isoformat() for week in columns]})

    @action(detail=False, methods=['get'], url_path='employee-of-month')
    def employee_of_the_month(self, request):
        return Response(employee_of_month(_year_param(request), _month_param(request)))


# ---------------------------------------------------------------------------
# Challenges
# ---------------------------------------------------------------------------

class ChallengeViewSet(viewsets.ModelViewSet):
    """
    Challenges, listed active first, then expired, then completed,
    each group by nearest end date.
    """

    serializer_class = ChallengeSerializer
    queryset = Challenge.objects.all()
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['status', 'target_type']
    search_fields = ['title', 'description', 'prize']
    pagination_class = StandardResultsSetPagination

    def get_queryset(self):
        return (
            super()
            .get_queryset()
            .annotate(
                status_priority=Case(
                    When(status=Challenge.Status.ACTIVE, then=Value(1)),
                    When(status=Challenge.Status.EXPIRED, then=Value(2)),
                    When(status=Challenge.Status.COMPLETED, then=Value(3)),
                    default=Value(999),
                    output_field=IntegerField(),
                )
            )
            .order_by('status_priority', 'end_date')
        )

    @action(detail=True, methods=['get'], url_path='progress')
    def progress(self, request, pk=None):
        challenge = self.get_object()
        return Response(challenge_progress(challenge, timezone.localdate()))

    @action(detail=True, methods=['post'], url_path='winners')
    def winners(self, request, pk=None):
        challenge = self.get_object()
        serializer = ChallengeWinnersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            challenge.assign_winners(serializer.validated_data['winner_ids'])
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)
        return Response(ChallengeSerializer(challenge).data)

    @action(detail=False, methods=['post'], url_path='evaluate', permission_classes=[IsAdmin])
    def evaluate(self, request):
        """Run the periodic evaluation now."""
        result = evaluate_challenges(timezone.now())
        return Response(result)


# ---------------------------------------------------------------------------
# Goals, configuration & commissions
# ---------------------------------------------------------------------------

class MonthlyGoalsAPIView(APIView):
    """GET/PUT the 12 monthly goals of ``?year=``."""

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        year = _year_param(request)
        today = timezone.localdate()
        data = {'year': year, 'goals': get_monthly_goals(year), 'annual_goal': annual_goal(year)}
        if year == today.year:
            data['current_month_goal'] = month_goal(year, today.month)
        return Response(data)

    def put(self, request):
        year = _year_param(request)
        payload = request.data.get('goals') if isinstance(request.data, dict) else request.data
        serializer = MonthlyGoalSerializer(data=payload, many=True)
        serializer.is_valid(raise_exception=True)
        try:
            goals = update_monthly_goals(year, serializer.validated_data)
        except DjangoValidationError as exc:
            raise _as_drf_error(exc)
        return Response({'year': year, 'goals': goals})


class GoalReportAPIView(APIView):
    """Monthly reconciliation of goals against signed contracts."""

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request):
        year = _year_param(request)
        return Response(commercial_goal_report(year, timezone.localdate()))


class ConfigurationAPIView(APIView):
    """GET/PUT one editable configuration blob."""

    permission_classes = [IsAdminOrReadOnly]

    def _check_type(self, config_type):
        if config_type not in EDITABLE_TYPES:
            raise ValidationError({'config_type': f"Tipo de configuração inválido: {config_type}."})

    def get(self, request, config_type):
        self._check_type(config_type)
        if config_type == OPERATIONAL_COSTS:
            year = timezone.localdate().year
            data = get_operational_costs([year - 1, year])
        else:
            data = get_config(config_type, default=[])
        return Response({'config_type': config_type, 'config_data': data})

    def put(self, request, config_type):
        self._check_type(config_type)
        serializer = ConfigurationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        config = set_config(config_type, serializer.validated_data['config_data'])
        return Response({'config_type': config.config_type, 'config_data': config.config_data})


class CommissionsAPIView(APIView):
    """
    Commissions of ``?employee=`` as ``?role=closer|sdr``.

    - months: contracts, total and commission per month of ``?year=``
    - current_month_total: value closed in the current month
    - open_contracts: proposals still open, with the commission each tier would pay
    """

    def get(self, request):
        employee_id = request.query_params.get('employee')
        role = (request.query_params.get('role') or 'closer').lower()
        if not employee_id:
            raise ValidationError({'employee': 'Informe o funcionário.'})
        try:
            uuid.UUID(str(employee_id))
        except ValueError:
            raise ValidationError({'employee': 'Identificador inválido.'})
        if role not in ('closer', 'sdr'):
            raise ValidationError({'role': "Use 'closer' ou 'sdr'."})
        year = _year_param(request)

        owner_filter = {'sdr_id': employee_id} if role == 'sdr' else {'closer_id': employee_id}
        proposals = list(Proposal.objects.filter(
            status__in=[Proposal.Status.WON, *Proposal.OPEN_STATUSES], **owner_filter,
        ))
        tiers = load_tiers()
        months = monthly_commissions(proposals, employee_id, role, year, tiers)
        pending = open_contracts(proposals, employee_id, role)

        data = {
            key: {
                'contracts': [str(p.pk) for p in bucket['contracts']],
                'total_value': bucket['total_value'],
                'commission': bucket['commission'],
            }
            for key, bucket in months.items()
        }
        year_total = sum((bucket['total_value'] for bucket in months.values()), 0)
        return Response({
            'employee': employee_id,
            'role': role,
            'year': year,
            'months': data,
            'progress': progress_info(year_total, tiers),
            'current_month_total': month_total(proposals, employee_id, role, timezone.localdate()),
            'open_contracts': [
                {'id': str(p.pk), 'client': p.client, 'status': p.status, 'total_value': p.total_value}
                for p in pending
            ],
            'open_contracts_potential': open_contracts_potential(proposals, employee_id, role, tiers),
        })


class BonusFundAPIView(APIView):
    """Bonus fund accrued from signed contracts and each employee's projected share."""

    def get(self, request):
        return Response(current_bonus_fund(timezone.localdate()))
