"""Product domain constants."""

from django.db import models


class ProductEventType(models.TextChoices):
    CREATED = "ProductCreated", "Product created"
    UPDATED = "ProductUpdated", "Product updated"
    DELETED = "ProductDeleted", "Product deleted"


DELETED_MESSAGE = "Product deleted successfully."
