from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="NewsPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("summary", models.TextField(blank=True, null=True)),
                ("cover_url", models.CharField(blank=True, max_length=1000, null=True)),
                ("slug", models.SlugField(blank=True, max_length=255, null=True, unique=True)),
                ("content_html", models.TextField()),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "news",
                "ordering": ("-published_at", "-created_at"),
                "indexes": [
                    models.Index(fields=["published_at", "created_at"], name="news_published_created_idx"),
                ],
            },
        ),
    ]
