from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'breeding'

router = DefaultRouter()
router.register(r'couples', views.CoupleViewSet, basename='couple')
router.register(r'nests', views.NestViewSet, basename='nest')
router.register(r'eggs', views.EggViewSet, basename='egg')

urlpatterns = [
    # CRUD   /api/breeding/couples/                 - Couples (?season=, ?active=)
    # GET    /api/breeding/couples/{id}/nests/      - Nests of couple
    # GET    /api/breeding/couples/{id}/offspring/  - Hatched birds of couple
    # CRUD   /api/breeding/nests/                   - Nests (?couple=, ?active=)
    # GET    /api/breeding/nests/{id}/eggs/         - Eggs of nest
    # POST   /api/breeding/nests/{id}/hatch/        - Mark eggs hatched
    # CRUD   /api/breeding/eggs/                    - Eggs (?nest=)
    path('', include(router.urls)),
]
