from tortoise import fields, models

class BlogPost(models.Model):
    id = fields.IntField(pk=True)
    user_id = fields.CharField(max_length=100)
    title = fields.TextField()
    meta_title = fields.TextField(null=True)
    meta_description = fields.TextField(null=True)
    url_slug = fields.TextField(null=True)
    h1_title = fields.TextField(null=True)
    short_intro = fields.TextField(null=True)
    content = fields.TextField(null=True)
    faq_content = fields.JSONField(null=True)
    word_count = fields.IntField(null=True)
    seo_score = fields.IntField(null=True)
    status = fields.CharField(max_length=32, default='draft')
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "blog_posts"
