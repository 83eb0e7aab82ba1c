from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('scheduling', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Certificate',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('display_name', models.CharField(max_length=400)),
                ('percentage', models.PositiveSmallIntegerField()),
                ('style', models.CharField(blank=True, max_length=80)),
                ('title', models.CharField(max_length=200)),
                ('medallion', models.CharField(max_length=16)),
                ('event_date_text', models.CharField(blank=True, max_length=40)),
                ('certificate_url', models.URLField(max_length=400)),
                ('recipient_email', models.EmailField(blank=True, max_length=254)),
                ('sent_at', models.DateTimeField(blank=True, null=True)),
                ('sent_by', models.CharField(blank=True, max_length=64)),
                ('downloaded', models.BooleanField(default=False)),
                ('downloaded_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('performance', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='certificate', to='scheduling.performance')),
            ],
            options={
                'ordering': ('-created_at',),
            },
        ),
    ]
