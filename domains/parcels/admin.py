from django.contrib import admin

from .models import Parcel, ParcelUpdate


class ParcelUpdateInline(admin.TabularInline):
    model = ParcelUpdate
    extra = 0
    fields = ("time", "event", "location", "created_at", "updated_at")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("-time", "-created_at")


@admin.register(Parcel)
class ParcelAdmin(admin.ModelAdmin):
    list_display = ("code", "created_at")
    search_fields = ("code",)
    inlines = [ParcelUpdateInline]


@admin.register(ParcelUpdate)
class ParcelUpdateAdmin(admin.ModelAdmin):
    list_display = ("id", "parcel", "time", "event", "location", "updated_at")
    list_filter = ("time",)
    search_fields = ("parcel__code", "event", "location")
    ordering = ("-time", "-created_at")
