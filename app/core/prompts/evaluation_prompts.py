"""Prompts and canned feedback for sentence evaluation.

Learners are Vietnamese speakers, so feedback is requested in Vietnamese.
The free-text verdict ends with a "Kết luận" line carrying ĐẠT (pass) or
CHƯA ĐẠT (not yet passed).
"""

PASS_MARKER = "ĐẠT"
FAIL_MARKER = "CHƯA ĐẠT"
CONCLUSION_PASS = "Kết luận: ĐẠT"

SENTENCE_EVALUATION_PROMPT = """Bạn là giáo viên tiếng Anh. Hãy đánh giá câu tiếng Anh mà học sinh đặt với từ vựng được giao.

Từ vựng: "{word}" (nghĩa: {meaning})
Câu của học sinh: "{user_input}"

Tiêu chí:
- ĐẠT: dùng từ "{word}" đúng nghĩa, ngữ pháp cơ bản đúng, câu có nghĩa.
- CHƯA ĐẠT: không dùng từ, sai ngữ pháp nghiêm trọng hoặc câu không có nghĩa.
- Không trừ điểm vì thiếu viết hoa đầu câu hoặc thiếu dấu chấm cuối câu.

Trả lời bằng văn bản thuần (không JSON, không markdown), đúng 4 dòng:
📚 Từ vựng: <nhận xét cách dùng từ "{word}">
🔤 Ngữ pháp: <nhận xét ngữ pháp, chỉ ra lỗi cụ thể nếu có>
✨ Chất lượng: <nhận xét tổng thể về câu>
💡 Kết luận: <ĐẠT hoặc CHƯA ĐẠT> kèm gợi ý ngắn
"""

MEANING_EVALUATION_PROMPT = """Evaluate whether the learner's answer shows they understand the English vocabulary word.

Word: "{word}"
Expected meaning: "{meaning}"
Learner's answer: "{user_input}"

Accept synonyms, partial matches and other ways of expressing the same concept.
Be generous but fair: basic understanding is a pass.

Respond with JSON only:
{{
  "passed": true or false,
  "feedback": "short explanation in Vietnamese, ending with ✓ if passed or ✗ if not",
  "confidence": number between 0.0 and 1.0
}}
"""

PRACTICE_FEEDBACK_PROMPT = """Bạn là giáo viên tiếng Anh. Nhận xét ngắn gọn bằng tiếng Việt về cách học sinh dùng từ vựng.

Từ vựng: "{word}"
Nghĩa: {meaning}
Ví dụ: {example}
Câu của học sinh: "{user_input}"

Yêu cầu:
- Không chào hỏi, tối đa 60 từ
- Nhận xét đúng/sai nghĩa và ngữ pháp
- Đưa ra cách sửa nếu cần
- Khen ngắn gọn nếu câu tốt
"""

FALLBACK_WORD_USED = '✅ Tốt! Bạn đã dùng từ "{word}" trong câu. (AI tạm thời không khả dụng)'
FALLBACK_WORD_MISSING = '❌ Bạn chưa dùng từ "{word}" trong câu. Hãy viết lại câu có chứa từ này.'

MEANING_CORRECT = "Trả lời đúng! ✓"
MEANING_RETRY = "Hãy thử lại! ✗"
