from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


def _criterion(label):
    return models.DecimalField(
        decimal_places=2,
        max_digits=5,
        validators=[
            django.core.validators.MinValueValidator(Decimal('0')),
            django.core.validators.MaxValueValidator(Decimal('20')),
        ],
        verbose_name=label,
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('scheduling', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Score',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('technical_score', _criterion('Técnica')),
                ('musical_score', _criterion('Musicalidad')),
                ('performance_score', _criterion('Interpretación')),
                ('styling_score', _criterion('Estilo')),
                ('overall_impression_score', _criterion('Impresión general')),
                ('total_score', models.DecimalField(decimal_places=2, default=Decimal('0'), editable=False, max_digits=6)),
                ('comments', models.TextField(blank=True, default='')),
                ('submitted_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('judge', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='scores', to=settings.AUTH_USER_MODEL)),
                ('performance', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='scheduling.performance')),
            ],
            options={
                'ordering': ('performance', 'submitted_at'),
            },
        ),
        migrations.AddConstraint(
            model_name='score',
            constraint=models.UniqueConstraint(fields=('performance', 'judge'), name='uniq_performance_judge_score'),
        ),
        migrations.CreateModel(
            name='ScoreAudit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('performance_id_snapshot', models.CharField(max_length=36)),
                ('judge_id_snapshot', models.CharField(max_length=64)),
                ('edit_mode', models.CharField(choices=[('criteria', 'Criterios'), ('total', 'Solo total')], default='criteria', max_length=8)),
                ('previous_values', models.JSONField()),
                ('new_values', models.JSONField()),
                ('edited_by', models.CharField(max_length=64)),
                ('edited_by_name', models.CharField(blank=True, max_length=160)),
                ('edited_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('score', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audits', to='judging.score')),
            ],
            options={
                'ordering': ('-edited_at', '-id'),
                'default_permissions': ('add', 'view'),
            },
        ),
        migrations.CreateModel(
            name='ScoreApproval',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('action', models.CharField(choices=[('publish', 'Publish')], default='publish', max_length=16)),
                ('approved_by', models.CharField(max_length=64)),
                ('approved_at', models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                ('total_judges', models.PositiveIntegerField(default=0)),
                ('scored_judges', models.PositiveIntegerField(default=0)),
                ('was_fully_scored', models.BooleanField(default=False)),
                ('performance', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='score_approvals', to='scheduling.performance')),
            ],
            options={
                'ordering': ('-approved_at',),
            },
        ),
    ]
