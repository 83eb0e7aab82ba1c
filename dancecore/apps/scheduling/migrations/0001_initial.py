from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
        ('registration', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Performance',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('contestant_id', models.CharField(max_length=64)),
                ('title', models.CharField(max_length=200)),
                ('participant_names', models.JSONField(blank=True, default=list)),
                ('duration', models.PositiveIntegerField(default=0, help_text='Minutos.')),
                ('choreographer', models.CharField(blank=True, max_length=160)),
                ('mastery', models.CharField(blank=True, max_length=60)),
                ('item_style', models.CharField(blank=True, max_length=80)),
                ('item_number', models.PositiveIntegerField(blank=True, null=True)),
                ('performance_order', models.PositiveIntegerField(blank=True, null=True)),
                ('status', models.CharField(
                    choices=[
                        ('scheduled', 'Scheduled'),
                        ('ready', 'Ready'),
                        ('hold', 'Hold'),
                        ('in_progress', 'In progress'),
                        ('completed', 'Completed'),
                        ('cancelled', 'Cancelled'),
                    ],
                    default='scheduled',
                    max_length=16,
                )),
                ('scores_published', models.BooleanField(default=False)),
                ('scores_published_at', models.DateTimeField(blank=True, null=True)),
                ('scores_published_by', models.CharField(blank=True, max_length=64)),
                ('entry_type', models.CharField(choices=[('live', 'Live'), ('virtual', 'Virtual')], default='live', max_length=8)),
                ('video_external_url', models.URLField(blank=True)),
                ('video_external_type', models.CharField(blank=True, max_length=20)),
                ('music_file_url', models.URLField(blank=True)),
                ('music_file_name', models.CharField(blank=True, max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('event', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='performances', to='events.event')),
                ('event_entry', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='performance', to='registration.evententry')),
            ],
            options={
                'ordering': ('event', 'performance_order', 'item_number', 'created_at'),
            },
        ),
    ]
