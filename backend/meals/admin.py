from django.contrib import admin

from .models import FavoriteMeal, Meal, MealRating


class MealRatingInline(admin.TabularInline):
    model = MealRating
    extra = 0
    readonly_fields = ("user_id", "rating", "rated_at")
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Meal)
class MealAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "caterer_id", "price", "available", "rating_average", "rating_count")
    list_filter = ("category", "available")
    search_fields = ("name", "caterer_id")
    readonly_fields = ("rating_average", "rating_count", "created_at")
    inlines = [MealRatingInline]


@admin.register(FavoriteMeal)
class FavoriteMealAdmin(admin.ModelAdmin):
    list_display = ("client_id", "meal", "created_at")
    search_fields = ("client_id",)
