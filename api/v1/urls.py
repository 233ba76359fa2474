# api/v1/urls.py
# /api/ 와 /api/v1/ 양쪽에 같은 라우트를 마운트 (config/urls.py)
# 프론트엔드가 슬래시 없이 호출하므로 경로 끝에 / 를 붙이지 않는다.
from django.urls import include, path

urlpatterns = [
    # --- Tracking (17TRACK 프록시) ---
    path("track", include(("domains.tracking.urls", "tracking"))),
    # --- Carriers ---
    path("carriers", include(("domains.carriers.urls", "carriers"))),
    # --- News ---  (news, news-post)
    path("", include(("domains.news.urls", "news"))),
    # --- Parcel updates ---
    path("parcel-updates", include(("domains.parcels.urls", "parcels"))),
]
