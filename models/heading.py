from tortoise import fields, Model

class Heading(Model):
    id = fields.IntField(pk=True)
    blog_post = fields.ForeignKeyField('models.BlogPost', related_name='headings')
    heading_level = fields.CharField(max_length=8)  # h1 / h2
    heading_text = fields.TextField()
    order_index = fields.IntField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "headings"
