from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Benchmark',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=160)),
                ('category', models.CharField(choices=[('girls', 'Girls'), ('hero', 'Hero'), ('1rm', '1RM'), ('open', 'Open'), ('custom', 'Custom')], default='custom', max_length=16)),
                ('score_type', models.CharField(choices=[('time', 'time'), ('reps', 'reps'), ('weight', 'weight'), ('time_or_reps', 'time_or_reps'), ('custom', 'custom')], default='time_or_reps', max_length=16)),
                ('time_cap_seconds', models.PositiveIntegerField(blank=True, null=True)),
                ('description_rx', models.TextField(blank=True)),
                ('description_scaled', models.TextField(blank=True)),
                ('default_track', models.CharField(choices=[('rx', 'RX'), ('scaled', 'Scaled')], default='rx', max_length=8)),
                ('source', models.CharField(default='user', max_length=8)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('category', 'name'),
                'unique_together': {('name', 'category')},
            },
        ),
        migrations.CreateModel(
            name='BenchmarkResult',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('track', models.CharField(choices=[('rx', 'RX'), ('scaled', 'Scaled')], default='rx', max_length=8)),
                ('score_type', models.CharField(choices=[('time', 'time'), ('reps', 'reps'), ('weight', 'weight'), ('time_or_reps', 'time_or_reps'), ('custom', 'custom')], max_length=16)),
                ('time_seconds', models.PositiveIntegerField(blank=True, help_text='Tiempo total en segundos.', null=True)),
                ('reps', models.PositiveIntegerField(blank=True, null=True)),
                ('weight', models.DecimalField(blank=True, decimal_places=2, max_digits=7, null=True)),
                ('unit', models.CharField(blank=True, choices=[('lb', 'lb'), ('kg', 'kg')], max_length=2)),
                ('completed_within_time_cap', models.BooleanField(blank=True, null=True)),
                ('performed_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('note', models.TextField(blank=True)),
                ('is_public', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('athlete', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='benchmark_results', to=settings.AUTH_USER_MODEL)),
                ('benchmark', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='results', to='benchmarks.benchmark')),
            ],
            options={
                'ordering': ('performed_at', 'id'),
            },
        ),
    ]
