from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Gym',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=160)),
                ('slug', models.SlugField(unique=True)),
                ('city', models.CharField(blank=True, max_length=120)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ('name',),
            },
        ),
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=160)),
                ('slug', models.SlugField(unique=True)),
                ('description', models.TextField(blank=True)),
                ('start_date', models.DateField(blank=True, null=True)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('DRAFT', 'Draft'), ('PUBLISHED', 'Published'), ('ARCHIVED', 'Archived')], default='DRAFT', max_length=16)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('gym', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='events', to='events.gym')),
            ],
            options={
                'ordering': ('-start_date', 'name'),
            },
        ),
        migrations.CreateModel(
            name='Division',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=120)),
                ('slug', models.SlugField(help_text='Slug único dentro del evento.')),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='divisions', to='events.event')),
            ],
            options={
                'ordering': ('name', 'id'),
                'unique_together': {('event', 'slug')},
            },
        ),
        migrations.CreateModel(
            name='Workout',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('order', models.PositiveIntegerField(default=1, help_text='Orden del WOD dentro del evento (1..N).')),
                ('name', models.CharField(max_length=160)),
                ('description', models.TextField(blank=True)),
                ('score_type', models.CharField(choices=[('TIME', 'Time'), ('REPS', 'Reps'), ('WEIGHT', 'Weight')], default='TIME', max_length=16)),
                ('unit', models.CharField(blank=True, help_text='"reps", "mm:ss", "lb" o "kg".', max_length=16)),
                ('is_published', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('event', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='workouts', to='events.event')),
            ],
            options={
                'ordering': ('event', 'order', 'id'),
                'unique_together': {('event', 'order')},
            },
        ),
    ]
