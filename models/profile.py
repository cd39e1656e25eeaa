from tortoise import fields, models

class Profile(models.Model):
    id = fields.IntField(pk=True)
    user_id = fields.CharField(max_length=100, unique=True)
    auto_save_enabled = fields.BooleanField(default=True)
    wordpress_url = fields.CharField(max_length=255, null=True)
    wordpress_username = fields.CharField(max_length=255, null=True)
    wordpress_app_password = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "profiles"
