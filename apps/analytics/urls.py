from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('statistics/', views.statistics, name='statistics'),
    path('species/', views.species_breakdown, name='species'),
    path('seasons/', views.season_summary, name='seasons'),
]
