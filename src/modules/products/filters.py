import django_filters

from modules.products.models import ALL_CATEGORIES, Product


class ProductListingFilter(django_filters.FilterSet):
    """Optional listing predicates layered on top of the listable queryset.

    ``category`` equal to ``"All"`` (or empty) applies no category filter;
    an empty ``q`` applies no name filter.
    """

    category = django_filters.CharFilter(method="filter_category")
    q = django_filters.CharFilter(field_name="product_name", lookup_expr="icontains")

    class Meta:
        model = Product
        fields = ["category", "q"]

    def filter_category(self, queryset, name, value):
        if not value or value == ALL_CATEGORIES:
            return queryset
        return queryset.filter(category=value)
