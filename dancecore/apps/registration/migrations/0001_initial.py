from django.db import migrations, models
import django.db.models.deletion

import dancecore.apps.registration.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Studio',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=160, unique=True)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('name',),
            },
        ),
        migrations.CreateModel(
            name='Contestant',
            fields=[
                ('id', models.CharField(default=dancecore.apps.registration.models._contestant_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=160)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('type', models.CharField(choices=[('private', 'Private'), ('studio', 'Studio')], default='private', max_length=8)),
                ('studio_name', models.CharField(blank=True, max_length=160)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('name',),
            },
        ),
        migrations.CreateModel(
            name='Dancer',
            fields=[
                ('id', models.CharField(default=dancecore.apps.registration.models._dancer_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('eodsa_id', models.CharField(default=dancecore.apps.registration.models.make_public_id, max_length=16, unique=True, verbose_name='Id público')),
                ('name', models.CharField(max_length=160)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('date_of_birth', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('contestant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='dancers', to='registration.contestant')),
                ('studio', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='dancers', to='registration.studio')),
            ],
            options={
                'ordering': ('name',),
            },
        ),
        migrations.CreateModel(
            name='EventEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('contestant_id', models.CharField(db_index=True, max_length=64)),
                ('eodsa_id', models.CharField(blank=True, max_length=16)),
                ('participant_ids', models.JSONField(blank=True, default=list)),
                ('item_name', models.CharField(max_length=200)),
                ('choreographer', models.CharField(blank=True, max_length=160)),
                ('mastery', models.CharField(blank=True, max_length=60)),
                ('item_style', models.CharField(blank=True, max_length=80)),
                ('estimated_duration', models.PositiveIntegerField(default=0, help_text='Minutos.')),
                ('performance_type', models.CharField(
                    blank=True,
                    choices=[('Solo', 'Solo'), ('Duet', 'Duet'), ('Trio', 'Trio'), ('Group', 'Group'), ('All', 'All')],
                    help_text='Si está vacío, usa el del evento.',
                    max_length=8,
                )),
                ('entry_type', models.CharField(choices=[('live', 'Live'), ('virtual', 'Virtual')], default='live', max_length=8)),
                ('approved', models.BooleanField(default=False)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('payment_status', models.CharField(choices=[('pending', 'Pending'), ('paid', 'Paid'), ('failed', 'Failed')], default='pending', max_length=8)),
                ('item_number', models.PositiveIntegerField(blank=True, null=True)),
                ('video_external_url', models.URLField(blank=True)),
                ('video_external_type', models.CharField(blank=True, max_length=20)),
                ('music_file_url', models.URLField(blank=True)),
                ('music_file_name', models.CharField(blank=True, max_length=200)),
                ('submitted_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='entries', to='events.event')),
            ],
            options={
                'ordering': ('-submitted_at',),
                'verbose_name_plural': 'event entries',
            },
        ),
        migrations.AddConstraint(
            model_name='evententry',
            constraint=models.UniqueConstraint(fields=('event', 'item_number'), name='uniq_event_item_number'),
        ),
    ]
