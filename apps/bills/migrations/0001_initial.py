# Generated manually for bills app

import uuid
from decimal import Decimal
import django.core.serializers.json
import django.core.validators
import django.utils.timezone
from django.db import migrations, models


def bill_fields():
    return [
        ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ('bill_number', models.PositiveIntegerField(editable=False, unique=True)),
        ('customer', models.CharField(max_length=200)),
        ('contact', models.CharField(blank=True, max_length=50)),
        ('description', models.TextField(blank=True)),
        ('items', models.JSONField(default=list, encoder=django.core.serializers.json.DjangoJSONEncoder)),
        ('total', models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
        ('gst', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
        ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PurchaseBill',
            fields=bill_fields(),
            options={
                'db_table': 'purchase_bills',
                'ordering': ['-created_at', '-bill_number'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='SellBill',
            fields=bill_fields(),
            options={
                'db_table': 'sell_bills',
                'ordering': ['-created_at', '-bill_number'],
                'abstract': False,
            },
        ),
    ]
