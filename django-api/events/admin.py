from django.contrib import admin

from events.models import Event, Registration, Student, UserProfile


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    fields = ["user", "ticket_id", "ticket_issued_at", "created_at"]
    readonly_fields = ["ticket_id", "ticket_issued_at", "created_at"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "date", "time", "end_time", "location", "university_name"]
    search_fields = ["title", "location", "university_name"]
    list_filter = ["date"]
    inlines = [RegistrationInline]


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["user", "event", "ticket_id", "created_at"]
    list_filter = ["event"]


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ["roll_number", "name", "email", "course", "year"]
    search_fields = ["roll_number", "name", "email"]


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "role"]
    list_filter = ["role"]
