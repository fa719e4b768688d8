from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'birds'

router = DefaultRouter()
router.register(r'health-records', views.HealthRecordViewSet, basename='health-record')
router.register(r'', views.BirdViewSet, basename='bird')

urlpatterns = [
    # GET    /api/birds/                          - List birds (search, status, gender, aviary)
    # POST   /api/birds/                          - Add bird
    # GET    /api/birds/{id}/                     - Get bird
    # PATCH  /api/birds/{id}/                     - Update bird / assign aviary
    # DELETE /api/birds/{id}/                     - Remove bird
    # GET    /api/birds/{id}/parents/             - Father and mother
    # GET    /api/birds/{id}/children/            - Direct offspring
    # GET    /api/birds/{id}/pedigree/?depth=     - Ancestor tree
    # GET    /api/birds/{id}/health-records/      - Health records of bird
    # GET    /api/birds/ring-check/?ring_number=  - Ring number conflicts
    # GET    /api/birds/candidates/?gender=       - Breeding candidates
    # CRUD   /api/birds/health-records/           - Health records
    path('', include(router.urls)),
]
