"""
聽寫評分範例

展示如何建立參考句、評分作答、合併總分並輸出顯示用解答。
"""

from dictascore import DictationEngine, GradingConfig, enable_timing_logging


def demo_grading():
    """基本評分流程"""
    print("=" * 60)
    print("範例 1: 評分兩句作答")
    print("=" * 60)

    engine = DictationEngine(GradingConfig(typo_factor=0.5, mistakes_mastering=1, mistakes_passing=3))
    sentences = engine.create_sentences([
        "The horse runs across the field.",
        "It was already late.",
    ])
    results = engine.grade_all(sentences, [
        "The house runs accross field",
        "It was late",
    ])

    for sentence, result in zip(sentences, results):
        print(f"句子 {sentence.index}: {result.tally.as_dict()} (計入 {result.total}/{sentence.max_mistakes})")

    submission = engine.aggregate(results)
    print(f"\n分數: {submission.score}/{submission.max_score}")
    print(f"通過: {submission.passed}, 精熟: {submission.mastered}")
    print()


def demo_solution():
    """輸出顯示用解答"""
    print("=" * 60)
    print("範例 2: 顯示用解答")
    print("=" * 60)

    engine = DictationEngine()
    result = engine.grade(engine.configure_sentence("Hello, world! Bye."), "hello big world")

    for word in engine.renderable_solution(result):
        print(f"  {word.type.value:<8} solution={word.solution!r:<10} answer={word.answer!r:<10} "
              f"penalty={word.penalty}")
    print()


def demo_timing():
    """使用 on_timing 回呼收集計時資訊"""
    print("=" * 60)
    print("範例 3: 計時")
    print("=" * 60)

    enable_timing_logging()
    timing_data = []
    engine = DictationEngine(on_timing=lambda op, elapsed: timing_data.append((op, elapsed)))
    sentence = engine.configure_sentence("to be or not to be")
    for answer in ["to be or not to be", "to be not to be", "be or not"]:
        engine.grade(sentence, answer)

    for operation, elapsed in timing_data:
        print(f"  {operation}: {elapsed * 1000:.3f} ms")
    print()


if __name__ == "__main__":
    demo_grading()
    demo_solution()
    demo_timing()
