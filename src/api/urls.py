"""Main API URL router for /api/v1/."""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from api.v1 import budget_views
from api.v1 import views as v1_views

router = DefaultRouter()
router.register(r'employees', v1_views.EmployeeViewSet, basename='employee')
router.register(r'proposals', v1_views.ProposalViewSet, basename='proposal')
router.register(r'weekly-performance', v1_views.WeeklyPerformanceViewSet, basename='weekly-performance')
router.register(r'challenges', v1_views.ChallengeViewSet, basename='challenge')
router.register(r'budgets', budget_views.BudgetViewSet, basename='budget')
router.register(r'budget-positions', budget_views.BudgetPostViewSet, basename='budget-position')
router.register(r'budget-parameters/job-roles', budget_views.JobRoleViewSet, basename='budget-job-role')
router.register(r'budget-parameters/work-scales', budget_views.WorkScaleViewSet, basename='budget-work-scale')
router.register(r'budget-parameters/cities', budget_views.CityViewSet, basename='budget-city')
router.register(r'budget-parameters/uniforms', budget_views.UniformViewSet, basename='budget-uniform')
router.register(r'budget-parameters/social-charges', budget_views.SocialChargeViewSet, basename='budget-social-charge')
router.register(r'budget-parameters/materials', budget_views.MaterialViewSet, basename='budget-material')
router.register(r'budget-parameters/salary-additions', budget_views.SalaryAdditionViewSet, basename='budget-salary-addition')

urlpatterns = [
    path('goals/monthly/', v1_views.MonthlyGoalsAPIView.as_view(), name='api-goals-monthly'),
    path('goals/report/', v1_views.GoalReportAPIView.as_view(), name='api-goals-report'),
    path(
        'configuration/<str:config_type>/',
        v1_views.ConfigurationAPIView.as_view(),
        name='api-configuration',
    ),
    path('commissions/', v1_views.CommissionsAPIView.as_view(), name='api-commissions'),
    path('bonus-fund/', v1_views.BonusFundAPIView.as_view(), name='api-bonus-fund'),
    path('', include(router.urls)),
]
