"""User-facing messages shown by the reading page."""

INVALID_FILE_MESSAGE = "请上传有效的图片文件。"
READ_FAILURE_MESSAGE = "读取图片文件失败。"
SERVICE_FAILURE_MESSAGE = "神秘连接中断。请重试。"

# Shown as the reading when the service answers without text
EMPTY_READING_FALLBACK = "灵界保持沉默。请重试。"
