from django.contrib import admin

from billing.models import Invoice, Performance, Play


class PerformanceInline(admin.TabularInline):
    model = Performance
    extra = 1


@admin.register(Play)
class PlayAdmin(admin.ModelAdmin):
    list_display = ["play_id", "name", "genre"]
    search_fields = ["play_id", "name"]
    list_filter = ["genre"]


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ["customer", "created_at"]
    search_fields = ["customer"]
    inlines = [PerformanceInline]


@admin.register(Performance)
class PerformanceAdmin(admin.ModelAdmin):
    list_display = ["invoice", "play_id", "audience", "position"]
    list_filter = ["invoice__customer"]
