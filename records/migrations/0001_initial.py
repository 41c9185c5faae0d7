import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='UserAccount',
            fields=[
                ('mcr_number', models.CharField(max_length=20, primary_key=True, serialize=False)),
                ('email', models.EmailField(max_length=255)),
                ('user_password', models.CharField(max_length=255)),
                ('role', models.CharField(choices=[('management', 'Management'), ('hr', 'Human Resources'), ('doctor', 'Doctor')], max_length=20)),
            ],
            options={
                'db_table': 'user_data',
            },
        ),
        migrations.CreateModel(
            name='StaffRecord',
            fields=[
                ('mcr_number', models.CharField(max_length=20, primary_key=True, serialize=False)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('department', models.CharField(max_length=100)),
                ('appointment', models.CharField(max_length=100)),
                ('teaching_training_hours', models.FloatField(blank=True, null=True)),
                ('start_date', models.DateField(blank=True, null=True)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('renewal_start_date', models.DateField(blank=True, null=True)),
                ('renewal_end_date', models.DateField(blank=True, null=True)),
                ('email', models.EmailField(max_length=255)),
                ('created_by', models.CharField(blank=True, max_length=20, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_by', models.CharField(blank=True, max_length=20, null=True)),
                ('updated_at', models.DateTimeField(blank=True, null=True)),
                ('deleted', models.BooleanField(db_index=True, default=False)),
                ('deleted_by', models.CharField(blank=True, max_length=20, null=True)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'db_table': 'main_data',
            },
        ),
        migrations.CreateModel(
            name='Contract',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('school_name', models.CharField(max_length=255)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('status', models.CharField(max_length=50)),
                ('prev_title', models.CharField(blank=True, default='', max_length=255)),
                ('new_title', models.CharField(blank=True, default='', max_length=255)),
                ('training_hours', models.FloatField(blank=True, null=True)),
                ('training_hours_2022', models.FloatField(blank=True, null=True)),
                ('training_hours_2023', models.FloatField(blank=True, null=True)),
                ('training_hours_2024', models.FloatField(blank=True, null=True)),
                ('staff', models.ForeignKey(db_column='mcr_number', on_delete=django.db.models.deletion.CASCADE, related_name='contracts', to='records.staffrecord')),
            ],
            options={
                'db_table': 'contracts',
            },
        ),
        migrations.CreateModel(
            name='Promotion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('previous_title', models.CharField(max_length=255)),
                ('new_title', models.CharField(max_length=255)),
                ('promotion_date', models.DateField()),
                ('staff', models.ForeignKey(db_column='mcr_number', on_delete=django.db.models.deletion.CASCADE, related_name='promotions', to='records.staffrecord')),
            ],
            options={
                'db_table': 'promotions',
            },
        ),
        migrations.CreateModel(
            name='Posting',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('academic_year', models.CharField(max_length=20)),
                ('school_name', models.CharField(max_length=255)),
                ('posting_number', models.PositiveIntegerField()),
                ('total_training_hour', models.FloatField()),
                ('rating', models.FloatField()),
                ('staff', models.ForeignKey(db_column='mcr_number', on_delete=django.db.models.deletion.CASCADE, related_name='postings', to='records.staffrecord')),
            ],
            options={
                'db_table': 'postings',
                'unique_together': {('staff', 'school_name', 'academic_year', 'posting_number')},
            },
        ),
    ]
