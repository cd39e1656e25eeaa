from tortoise import fields, Model
from enum import Enum

class KeywordTypeEnum(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SEMANTIC = "semantic"
    LSI = "lsi"

class Keyword(Model):
    id = fields.IntField(pk=True)
    blog_post = fields.ForeignKeyField('models.BlogPost', related_name='keywords')
    keyword_type = fields.CharEnumField(KeywordTypeEnum)
    keyword_text = fields.TextField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "keywords"
