from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    # Authentication
    path('register-organization/', views.register_organization, name='register-organization'),
    path('login/', views.login, name='login'),

    # Profile
    path('profile/', views.profile, name='profile'),

    # Organization members
    path('invite/', views.invite_member, name='invite'),
    path('members/', views.list_members, name='members'),
]
