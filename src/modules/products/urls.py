"""Product and Category URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import CategoryViewSet, ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("products", ProductViewSet, basename="product")
router.register("categories", CategoryViewSet, basename="category")

urlpatterns = router.urls
