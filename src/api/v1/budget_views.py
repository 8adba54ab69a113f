"""ViewSets and endpoints for the budgets module."""
from __future__ import annotations

from django.db.models import ProtectedError
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from api.v1.budget_serializers import (
    BudgetPostCreateSerializer,
    BudgetPostSerializer,
    BudgetSerializer,
    CitySerializer,
    JobRoleSerializer,
    MaterialSerializer,
    PositionCalculationSerializer,
    SalaryAdditionSerializer,
    SocialChargeSerializer,
    UniformSerializer,
    WorkScaleSerializer,
)
from api.v1.pagination import StandardResultsSetPagination
from api.v1.permissions import IsAdminOrReadOnly
from budgets.models import (
    Budget,
    BudgetPost,
    City,
    JobRole,
    Material,
    SalaryAddition,
    SocialCharge,
    Uniform,
    WorkScale,
)
from budgets.services import add_position, price_position, remove_position


class BudgetParameterViewSet(viewsets.ModelViewSet):
    """Shared setup of the budget parameter tables (filter ``?is_active=``)."""

    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['is_active']
    pagination_class = StandardResultsSetPagination

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            raise ValidationError({'detail': 'Parâmetro usado em postos de orçamento; desative-o em vez de excluir.'})


class JobRoleViewSet(BudgetParameterViewSet):
    queryset = JobRole.objects.all()
    serializer_class = JobRoleSerializer
    search_fields = ['role_name']


class WorkScaleViewSet(BudgetParameterViewSet):
    queryset = WorkScale.objects.all()
    serializer_class = WorkScaleSerializer
    search_fields = ['scale_name']


class CityViewSet(BudgetParameterViewSet):
    queryset = City.objects.all()
    serializer_class = CitySerializer
    search_fields = ['name']


class UniformViewSet(BudgetParameterViewSet):
    queryset = Uniform.objects.all()
    serializer_class = UniformSerializer


class SocialChargeViewSet(BudgetParameterViewSet):
    queryset = SocialCharge.objects.all()
    serializer_class = SocialChargeSerializer


class MaterialViewSet(BudgetParameterViewSet):
    queryset = Material.objects.all()
    serializer_class = MaterialSerializer


class SalaryAdditionViewSet(BudgetParameterViewSet):
    queryset = SalaryAddition.objects.all()
    serializer_class = SalaryAdditionSerializer


class BudgetViewSet(viewsets.ModelViewSet):
    """Budgets; ``total_value`` is the sum of their positions."""

    queryset = Budget.objects.all()
    serializer_class = BudgetSerializer
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['status']
    search_fields = ['client', 'project_name']
    ordering_fields = ['budget_number', 'total_value', 'created_at']
    pagination_class = StandardResultsSetPagination


class BudgetPostViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Staffed positions of a budget.

    - create: prices the position (blocks 1-8) and updates the budget total
    - destroy: removes it and updates the budget total
    - calculate: prices a position without saving it
    """

    queryset = BudgetPost.objects.select_related('budget', 'job_role', 'work_scale', 'city')
    serializer_class = BudgetPostSerializer
    permission_classes = [IsAdminOrReadOnly]
    filterset_fields = ['budget']
    pagination_class = StandardResultsSetPagination

    def create(self, request, *args, **kwargs):
        serializer = BudgetPostCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        post = add_position(data.pop('budget'), data.pop('post_name'), **data)
        return Response(BudgetPostSerializer(post).data, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        remove_position(instance)

    @action(detail=False, methods=['post'], url_path='calculate')
    def calculate(self, request):
        serializer = PositionCalculationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        inputs, cost = price_position(**serializer.validated_data)
        return Response({
            'breakdown': cost.as_dict(),
            'materials': inputs.materials,
            'uniforms': inputs.uniforms,
        })
