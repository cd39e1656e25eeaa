from tortoise import fields, models

class BlogDraft(models.Model):
    id = fields.IntField(pk=True)
    user_id = fields.CharField(max_length=100, unique=True)  # one draft row per user
    keywords = fields.JSONField(null=True)
    meta_tags = fields.JSONField(null=True)
    headings = fields.JSONField(null=True)
    short_intro = fields.TextField(null=True)
    content = fields.TextField(null=True)
    faq_content = fields.JSONField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "blog_drafts"
