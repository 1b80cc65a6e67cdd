from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('events', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ScoreSubmission',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('athlete_name', models.CharField(blank=True, max_length=160)),
                ('score_type', models.CharField(choices=[('TIME', 'Time'), ('REPS', 'Reps'), ('WEIGHT', 'Weight')], max_length=16)),
                ('score_value', models.CharField(max_length=64)),
                ('submitted_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('athlete', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to=settings.AUTH_USER_MODEL)),
                ('division', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='events.division')),
                ('workout', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='scores', to='events.workout')),
            ],
            options={
                'ordering': ('submitted_at', 'id'),
            },
        ),
    ]
