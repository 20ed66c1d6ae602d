from django.urls import path

from . import views

app_name = "dotcalendar"

urlpatterns = [
    path("", views.index, name="index"),
    path("api/wallpaper/", views.wallpaper, name="wallpaper"),
]
