from django.urls import path
from . import views

app_name = 'backups'

urlpatterns = [
    path('export/', views.export_data, name='export'),
    path('import/', views.import_data, name='import'),
    path('snapshot/', views.snapshot, name='snapshot'),
    path('restore/', views.restore, name='restore'),
]
