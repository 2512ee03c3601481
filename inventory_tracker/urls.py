from django.contrib import admin
from django.urls import include, path

from utils.views import health

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('users.urls')),
    path('api/logs/', include('logs.urls')),
    path('api/health/', health, name='health'),
    path('api/', include('inventory.urls')),
]
