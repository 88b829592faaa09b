from django.urls import path

from .views import PhoneCodeSendView, PhoneCodeVerifyView

urlpatterns = [
    path("auth/phone/send", PhoneCodeSendView.as_view(), name="phone-code-send"),
    path("auth/phone/verify", PhoneCodeVerifyView.as_view(), name="phone-code-verify"),
]
