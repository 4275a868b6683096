from django.urls import path

from partsman import views

app_name = "partsman"

urlpatterns = [
    path("items/", views.item_list, name="item-list"),
    path("items/<str:item_id>/", views.item_detail, name="item-detail"),
    path("filter-groups/<str:category>/", views.filter_groups, name="filter-groups"),
]
