# domains/news/urls.py
from django.urls import path

from .views import NewsAPI, NewsPostDetailAPI

app_name = "news"

urlpatterns = [
    # /api/news  (GET 목록, POST/PUT/DELETE 관리자)
    path("news", NewsAPI.as_view(), name="news"),
    # /api/news-post?id= | ?slug=
    path("news-post", NewsPostDetailAPI.as_view(), name="news-post"),
]
