from tortoise import BaseDBAsyncClient


async def upgrade(db: BaseDBAsyncClient) -> str:
    return """
        CREATE TABLE IF NOT EXISTS `blog_drafts` (
    `id` INT NOT NULL PRIMARY KEY AUTO_INCREMENT,
    `user_id` VARCHAR(100) NOT NULL UNIQUE,
    `keywords` JSON,
    `meta_tags` JSON,
    `headings` JSON,
    `short_intro` LONGTEXT,
    `content` LONGTEXT,
    `faq_content` JSON,
    `created_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6),
    `updated_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6) ON UPDATE CURRENT_TIMESTAMP(6)
) CHARACTER SET utf8mb4;
CREATE TABLE IF NOT EXISTS `blog_posts` (
    `id` INT NOT NULL PRIMARY KEY AUTO_INCREMENT,
    `user_id` VARCHAR(100) NOT NULL,
    `title` LONGTEXT NOT NULL,
    `meta_title` LONGTEXT,
    `meta_description` LONGTEXT,
    `url_slug` LONGTEXT,
    `h1_title` LONGTEXT,
    `short_intro` LONGTEXT,
    `content` LONGTEXT,
    `faq_content` JSON,
    `word_count` INT,
    `seo_score` INT,
    `status` VARCHAR(32) NOT NULL DEFAULT 'draft',
    `created_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6),
    `updated_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6) ON UPDATE CURRENT_TIMESTAMP(6)
) CHARACTER SET utf8mb4;
CREATE TABLE IF NOT EXISTS `keywords` (
    `id` INT NOT NULL PRIMARY KEY AUTO_INCREMENT,
    `keyword_type` VARCHAR(9) NOT NULL COMMENT 'PRIMARY: primary\nSECONDARY: secondary\nSEMANTIC: semantic\nLSI: lsi',
    `keyword_text` LONGTEXT NOT NULL,
    `created_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6),
    `blog_post_id` INT NOT NULL,
    CONSTRAINT `fk_keywords_blog_pos_5e1f0a2c` FOREIGN KEY (`blog_post_id`) REFERENCES `blog_posts` (`id`) ON DELETE CASCADE
) CHARACTER SET utf8mb4;
CREATE TABLE IF NOT EXISTS `headings` (
    `id` INT NOT NULL PRIMARY KEY AUTO_INCREMENT,
    `heading_level` VARCHAR(8) NOT NULL,
    `heading_text` LONGTEXT NOT NULL,
    `order_index` INT NOT NULL,
    `created_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6),
    `blog_post_id` INT NOT NULL,
    CONSTRAINT `fk_headings_blog_pos_9b3c7d41` FOREIGN KEY (`blog_post_id`) REFERENCES `blog_posts` (`id`) ON DELETE CASCADE
) CHARACTER SET utf8mb4;
CREATE TABLE IF NOT EXISTS `profiles` (
    `id` INT NOT NULL PRIMARY KEY AUTO_INCREMENT,
    `user_id` VARCHAR(100) NOT NULL UNIQUE,
    `auto_save_enabled` BOOL NOT NULL DEFAULT 1,
    `wordpress_url` VARCHAR(255),
    `wordpress_username` VARCHAR(255),
    `wordpress_app_password` LONGTEXT,
    `created_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6),
    `updated_at` DATETIME(6) NOT NULL DEFAULT CURRENT_TIMESTAMP(6) ON UPDATE CURRENT_TIMESTAMP(6)
) CHARACTER SET utf8mb4;
CREATE TABLE IF NOT EXISTS `aerich` (
    `id` INT NOT NULL PRIMARY KEY AUTO_INCREMENT,
    `version` VARCHAR(255) NOT NULL,
    `app` VARCHAR(100) NOT NULL,
    `content` JSON NOT NULL
) CHARACTER SET utf8mb4;"""


async def downgrade(db: BaseDBAsyncClient) -> str:
    return """
        DROP TABLE IF EXISTS `headings`;
        DROP TABLE IF EXISTS `keywords`;
        DROP TABLE IF EXISTS `blog_posts`;
        DROP TABLE IF EXISTS `blog_drafts`;
        DROP TABLE IF EXISTS `profiles`;"""
