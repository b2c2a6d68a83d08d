from django.urls import path

from .views import DeriveProofView, VerifyProofView

app_name = "ldproofs"

urlpatterns = [
    path("derive", DeriveProofView.as_view(), name="derive"),
    path("verify", VerifyProofView.as_view(), name="verify"),
]
