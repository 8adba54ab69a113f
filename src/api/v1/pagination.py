"""Pagination utilities for API v1."""

from rest_framework.pagination import PageNumberPagination


class StandardResultsSetPagination(PageNumberPagination):
    """Page number pagination; the weekly grid asks for a whole year at once."""

    page_size = 25
    page_size_query_param = "page_size"
    max_page_size = 1000
