"""품질 지표용 텍스트 추출."""

import re

_WHITESPACE_RE = re.compile(r"\s+")


def extract_text_content(html: str) -> str:
    """HTML에서 보이는 텍스트만 추출한다.

    태그 내부, <script>, <style> 블록의 문자는 건너뛴다. 단어 수나 길이 같은
    품질 지표 계산에만 쓴다. 이스케이프를 하지 않으므로 재렌더링용 정제(sanitize)
    목적으로 사용하면 안 된다.

    Args:
        html: 원본 HTML 문자열

    Returns:
        공백이 정규화된 텍스트
    """
    chars: list[str] = []
    in_tag = False
    in_script = False
    in_style = False
    tag_buffer: list[str] = []

    for char in html:
        if char == "<":
            in_tag = True
            tag_buffer = ["<"]
        elif char == ">" and in_tag:
            tag_buffer.append(">")
            in_tag = False

            # 태그가 닫힐 때 script/style 블록 진입/이탈 판정
            tag = "".join(tag_buffer).lower()
            if "<script" in tag:
                in_script = True
            elif "</script" in tag:
                in_script = False
            elif "<style" in tag:
                in_style = True
            elif "</style" in tag:
                in_style = False

            tag_buffer = []
        elif in_tag:
            tag_buffer.append(char)
        elif not in_script and not in_style:
            chars.append(char)

    return _WHITESPACE_RE.sub(" ", "".join(chars)).strip()
