from django.contrib import admin

from .models import NewsPost


@admin.register(NewsPost)
class NewsPostAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "slug", "published_at", "created_at")
    search_fields = ("title", "slug", "summary")
    ordering = ("-published_at", "-created_at")
    readonly_fields = ("created_at",)
