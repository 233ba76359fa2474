from __future__ import annotations

from django.db import models


class Parcel(models.Model):
    code = models.CharField(max_length=64, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "parcels"

    def __str__(self) -> str:
        return self.code


class ParcelUpdate(models.Model):
    """운송장 코드별 수동 상태 업데이트 (관리자 입력)"""

    parcel = models.ForeignKey(
        Parcel,
        to_field="code",
        db_column="code",
        on_delete=models.CASCADE,
        related_name="updates",
    )
    time = models.DateTimeField()
    event = models.TextField(blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "parcel_updates"
        ordering = ("-time", "-created_at")
        indexes = [
            models.Index(fields=["parcel", "time"], name="parcel_upd_code_time_idx"),
        ]

    @property
    def code(self) -> str:
        return self.parcel_id

    def __str__(self) -> str:
        return f"{self.parcel_id}@{self.time}"
