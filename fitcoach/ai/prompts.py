"""Fixed texts for the fitness coach chat."""

COACH_SYSTEM_PROMPT = (
    "Bạn là huấn luyện viên fitness thân thiện, trả lời ngắn gọn, dễ hiểu. "
    "Luôn trả lời bằng Markdown với danh sách hoặc đoạn văn. "
    "Mỗi đoạn nên xuống dòng rõ ràng, dễ đọc."
)

# Returned when the vendor replies without a completion.
NO_ANSWER_TEXT = "Không có câu trả lời."

# Returned for every failed call.
ERROR_TEXT = "⚠️ Lỗi khi gọi AI."
