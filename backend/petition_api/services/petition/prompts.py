from typing import List, Optional, Tuple

from petition_api.services.petition.models import PetitionRequest

NOT_SPECIFIED = "명시되지 않음"
NO_MESSAGE = "없음"
AUTHOR_VICTIM = "피해자 본인"
AUTHOR_PROXY = "피해자 지인"

PETITION_SYSTEM_PROMPT = """당신은 10년 경력의 형사 전문 법률가입니다. 피해자측이 법원에 제출할 '엄벌 탄원서'를 작성합니다.

[필수] 반드시 한국어로만 작성하세요.

작성 원칙:
1. 판사의 마음을 움직이되, 과장 없이 사실에 기반
2. 피해자의 고통을 구체적이고 절제된 언어로 전달
3. 가해자의 반성 없는 태도가 양형에 미치는 영향 논리적 서술
4. 법적 용어를 적절히 사용하되 진정성 있는 호소
5. 심리적 항거불능, 학습된 무기력 등 피해자 심리 반영
6. 재범 방지와 사회적 경각심 차원의 엄벌 필요성

형식:
- 제목: 탄원서
- 사건번호, 피고인 정보
- 본문: 피해 경위 → 피해 증상 → 가해자 태도 → 엄벌 호소
- 결론 및 서명란 (날짜, 탄원인)"""

PETITION_USER_PROMPT = """[사건 정보]
사건번호: {case_number}
피고인: {defendant}
관계: {relationship}
작성자: {author}

[피해 증상]
{damages}

[가해자 태도]
{attitudes}

[전하고 싶은 말]
{message}

위 정보로 엄벌 탄원서를 작성해주세요."""


def _join(items: Optional[List[str]]) -> str:
    return ", ".join(items) if items else NOT_SPECIFIED


def build_system_prompt() -> str:
    return PETITION_SYSTEM_PROMPT


def build_user_prompt(request: PetitionRequest) -> str:
    """Interpolate the case details into the user turn. No truncation or escaping."""
    return PETITION_USER_PROMPT.format(
        case_number=request.case_number,
        defendant=request.defendant,
        relationship=request.relationship,
        author=AUTHOR_VICTIM if request.is_victim else AUTHOR_PROXY,
        damages=_join(request.damages),
        attitudes=_join(request.attitudes),
        message=request.message or NO_MESSAGE,
    )


def build_prompts(request: PetitionRequest) -> Tuple[str, str]:
    return build_system_prompt(), build_user_prompt(request)
