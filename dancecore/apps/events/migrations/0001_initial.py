from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=160)),
                ('slug', models.SlugField(unique=True)),
                ('region', models.CharField(blank=True, max_length=80)),
                ('venue', models.CharField(blank=True, max_length=160)),
                ('description', models.TextField(blank=True)),
                ('event_date', models.DateField(blank=True, null=True)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('performance_type', models.CharField(
                    choices=[('Solo', 'Solo'), ('Duet', 'Duet'), ('Trio', 'Trio'), ('Group', 'Group'), ('All', 'All')],
                    default='All',
                    help_text='Tipo por defecto si la inscripción no define el suyo.',
                    max_length=8,
                )),
                ('status', models.CharField(
                    choices=[
                        ('upcoming', 'Upcoming'),
                        ('registration_open', 'Registration open'),
                        ('registration_closed', 'Registration closed'),
                        ('in_progress', 'In progress'),
                        ('completed', 'Completed'),
                    ],
                    default='upcoming',
                    max_length=24,
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('-event_date', 'name'),
            },
        ),
        migrations.CreateModel(
            name='JudgeEventAssignment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_active', models.BooleanField(default=True)),
                ('display_order', models.PositiveIntegerField(default=0)),
                ('assigned_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='judge_assignments', to='events.event')),
                ('judge', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='judge_assignments', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('event', 'display_order', 'id'),
            },
        ),
        migrations.AddConstraint(
            model_name='judgeeventassignment',
            constraint=models.UniqueConstraint(fields=('event', 'judge'), name='uniq_event_judge'),
        ),
    ]
