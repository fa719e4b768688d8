# Generated manually for birds app

import uuid
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Bird',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('ring_number', models.CharField(db_index=True, max_length=100)),
                ('name', models.CharField(blank=True, max_length=200)),
                ('species', models.CharField(max_length=200)),
                ('subspecies', models.CharField(blank=True, max_length=200)),
                ('gender', models.CharField(choices=[('male', 'Male'), ('female', 'Female'), ('unknown', 'Unknown')], default='unknown', max_length=20)),
                ('color_mutation', models.CharField(blank=True, max_length=200)),
                ('birth_date', models.DateField()),
                ('origin', models.CharField(choices=[('purchased', 'Purchased'), ('bred', 'Bred'), ('rescue', 'Rescue')], default='purchased', max_length=20)),
                ('status', models.CharField(choices=[('active', 'Active'), ('deceased', 'Deceased'), ('sold', 'Sold'), ('exchanged', 'Exchanged')], default='active', max_length=20)),
                ('aviary_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('father_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('mother_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('image_uri', models.CharField(blank=True, max_length=500)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='birds', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'birds',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['owner', 'created_at'], name='birds_owner_created_idx'),
                    models.Index(fields=['owner', 'status'], name='birds_owner_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='HealthRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('bird_id', models.UUIDField(db_index=True)),
                ('date', models.DateField()),
                ('type', models.CharField(choices=[('vaccination', 'Vaccination'), ('medication', 'Medication'), ('checkup', 'Checkup'), ('other', 'Other')], default='checkup', max_length=20)),
                ('description', models.CharField(max_length=500)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='health_records', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'health_records',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['owner', 'bird_id'], name='health_owner_bird_idx')],
            },
        ),
    ]
