from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'aviaries'

router = DefaultRouter()
router.register(r'', views.AviaryViewSet, basename='aviary')

urlpatterns = [
    # GET    /api/aviaries/                 - List aviaries
    # POST   /api/aviaries/                 - Create aviary
    # GET    /api/aviaries/{id}/            - Get aviary
    # PATCH  /api/aviaries/{id}/            - Update aviary
    # DELETE /api/aviaries/{id}/            - Delete aviary
    # GET    /api/aviaries/{id}/birds/      - Birds in aviary
    # GET    /api/aviaries/{id}/occupancy/  - Birds vs capacity
    path('', include(router.urls)),
]
