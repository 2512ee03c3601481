from django.db import models

class Counter(models.Model):
    """Named monotonic sequence. Only utils.services.get_next_number changes ``value``."""
    key = models.CharField(max_length=100, unique=True)
    value = models.PositiveBigIntegerField(default=0)

    def __str__(self):
        return f"{self.key} = {self.value}"
