# Generated manually for breeding app

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
            name='Couple',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('male_id', models.UUIDField(db_index=True)),
                ('female_id', models.UUIDField(db_index=True)),
                ('season', models.CharField(max_length=20)),
                ('active', models.BooleanField(default=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='couples', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'couples',
                'ordering': ['created_at'],
                'indexes': [
                    models.Index(fields=['owner', 'created_at'], name='couples_owner_created_idx'),
                    models.Index(fields=['owner', 'season'], name='couples_owner_season_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Nest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('couple_id', models.UUIDField(db_index=True)),
                ('aviary_id', models.UUIDField(blank=True, null=True)),
                ('start_date', models.DateField()),
                ('active', models.BooleanField(default=True)),
                ('egg_count', models.PositiveIntegerField(blank=True, null=True)),
                ('expected_hatch_date', models.DateField(blank=True, null=True)),
                ('actual_hatch_date', models.DateField(blank=True, null=True)),
                ('hatched_count', models.PositiveIntegerField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='nests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'nests',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['owner', 'couple_id'], name='nests_owner_couple_idx')],
            },
        ),
        migrations.CreateModel(
            name='Egg',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nest_id', models.UUIDField(db_index=True)),
                ('lay_date', models.DateField()),
                ('status', models.CharField(choices=[('laid', 'Laid'), ('fertile', 'Fertile'), ('infertile', 'Infertile'), ('hatched', 'Hatched'), ('dead', 'Dead')], default='laid', max_length=20)),
                ('hatch_date', models.DateField(blank=True, null=True)),
                ('bird_id', models.UUIDField(blank=True, db_index=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='eggs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'eggs',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['owner', 'nest_id'], name='eggs_owner_nest_idx')],
            },
        ),
    ]
