"""Closed enumeration of the x86/x86-64 mnemonics the decoder can produce."""
from enum import IntEnum


class Opcode(IntEnum):
    """Instruction mnemonics. ``InvalOP`` marks an encoding with no table entry."""

    AAA = 0
    AAD = 1
    AAM = 2
    AAS = 3
    ADC = 4
    ADCX = 5
    ADD = 6
    ADDPD = 7
    ADDPS = 8
    ADDSD = 9
    ADDSS = 10
    ADDSUBPD = 11
    ADDSUBPS = 12
    ADOX = 13
    AESDEC = 14
    AESDECLAST = 15
    AESENC = 16
    AESENCLAST = 17
    AESIMC = 18
    AESKEYGENASSIST = 19
    AND = 20
    ANDN = 21
    ANDNPD = 22
    ANDNPS = 23
    ANDPD = 24
    ANDPS = 25
    ARPL = 26
    BEXTR = 27
    BLENDPD = 28
    BLENDPS = 29
    BLENDVPD = 30
    BLENDVPS = 31
    BLSI = 32
    BLSMSK = 33
    BLSR = 34
    BNDCL = 35
    BNDCN = 36
    BNDCU = 37
    BNDLDX = 38
    BNDMK = 39
    BNDMOV = 40
    BNDSTX = 41
    BOUND = 42
    BSF = 43
    BSR = 44
    BSWAP = 45
    BT = 46
    BTC = 47
    BTR = 48
    BTS = 49
    BZHI = 50
    CALLFar = 51
    CALLNear = 52
    CBW = 53
    CDQ = 54
    CDQE = 55
    CLAC = 56
    CLC = 57
    CLD = 58
    CLFLUSH = 59
    CLFLUSHOPT = 60
    CLI = 61
    CLRSSBSY = 62
    CLTS = 63
    CMC = 64
    CMOVA = 65
    CMOVAE = 66
    CMOVB = 67
    CMOVBE = 68
    CMOVC = 69
    CMOVG = 70
    CMOVGE = 71
    CMOVL = 72
    CMOVLE = 73
    CMOVNC = 74
    CMOVNO = 75
    CMOVNP = 76
    CMOVNS = 77
    CMOVNZ = 78
    CMOVO = 79
    CMOVP = 80
    CMOVS = 81
    CMOVZ = 82
    CMP = 83
    CMPPD = 84
    CMPPS = 85
    CMPSB = 86
    CMPSD = 87
    CMPSQ = 88
    CMPSS = 89
    CMPSW = 90
    CMPXCHG = 91
    CMPXCHG16B = 92
    CMPXCHG8B = 93
    COMISD = 94
    COMISS = 95
    CPUID = 96
    CQO = 97
    CRC32 = 98
    CVTDQ2PD = 99
    CVTDQ2PS = 100
    CVTPD2DQ = 101
    CVTPD2PI = 102
    CVTPD2PS = 103
    CVTPI2PD = 104
    CVTPI2PS = 105
    CVTPS2DQ = 106
    CVTPS2PD = 107
    CVTPS2PI = 108
    CVTSD2SI = 109
    CVTSD2SS = 110
    CVTSI2SD = 111
    CVTSI2SS = 112
    CVTSS2SD = 113
    CVTSS2SI = 114
    CVTTPD2DQ = 115
    CVTTPD2PI = 116
    CVTTPS2DQ = 117
    CVTTPS2PI = 118
    CVTTSD2SI = 119
    CVTTSS2SI = 120
    CWD = 121
    CWDE = 122
    DAA = 123
    DAS = 124
    DEC = 125
    DIV = 126
    DIVPD = 127
    DIVPS = 128
    DIVSD = 129
    DIVSS = 130
    DPPD = 131
    DPPS = 132
    EMMS = 133
    ENCLS = 134
    ENCLU = 135
    ENDBR32 = 136
    ENDBR64 = 137
    ENTER = 138
    EXTRACTPS = 139
    F2XM1 = 140
    FABS = 141
    FADD = 142
    FADDP = 143
    FBLD = 144
    FBSTP = 145
    FCHS = 146
    FCLEX = 147
    FCMOVB = 148
    FCMOVBE = 149
    FCMOVE = 150
    FCMOVNB = 151
    FCMOVNBE = 152
    FCMOVNE = 153
    FCMOVNU = 154
    FCMOVU = 155
    FCOM = 156
    FCOMI = 157
    FCOMIP = 158
    FCOMP = 159
    FCOMPP = 160
    FCOS = 161
    FDECSTP = 162
    FDIV = 163
    FDIVP = 164
    FDIVR = 165
    FDIVRP = 166
    FFREE = 167
    FIADD = 168
    FICOM = 169
    FICOMP = 170
    FIDIV = 171
    FIDIVR = 172
    FILD = 173
    FIMUL = 174
    FINCSTP = 175
    FINIT = 176
    FIST = 177
    FISTP = 178
    FISTTP = 179
    FISUB = 180
    FISUBR = 181
    FLD = 182
    FLD1 = 183
    FLDCW = 184
    FLDENV = 185
    FLDL2E = 186
    FLDL2T = 187
    FLDLG2 = 188
    FLDLN2 = 189
    FLDPI = 190
    FLDZ = 191
    FMUL = 192
    FMULP = 193
    FNCLEX = 194
    FNINIT = 195
    FNOP = 196
    FNSAVE = 197
    FNSTCW = 198
    FNSTENV = 199
    FNSTSW = 200
    FPATAN = 201
    FPREM = 202
    FPREM1 = 203
    FPTAN = 204
    FRNDINT = 205
    FRSTOR = 206
    FSAVE = 207
    FSCALE = 208
    FSIN = 209
    FSINCOS = 210
    FSQRT = 211
    FST = 212
    FSTCW = 213
    FSTENV = 214
    FSTP = 215
    FSTSW = 216
    FSUB = 217
    FSUBP = 218
    FSUBR = 219
    FSUBRP = 220
    FTST = 221
    FUCOM = 222
    FUCOMI = 223
    FUCOMIP = 224
    FUCOMP = 225
    FUCOMPP = 226
    FWAIT = 227
    FXAM = 228
    FXCH = 229
    FXRSTOR = 230
    FXRSTOR64 = 231
    FXSAVE = 232
    FXSAVE64 = 233
    FXTRACT = 234
    FYL2X = 235
    FYL2XP1 = 236
    GETSEC = 237
    GF2P8AFFINEINVQB = 238
    GF2P8AFFINEQB = 239
    GF2P8MULB = 240
    HADDPD = 241
    HADDPS = 242
    HLT = 243
    HSUBPD = 244
    HSUBPS = 245
    IDIV = 246
    IMUL = 247
    IN = 248
    INC = 249
    INCSSP = 250
    INS = 251
    INSB = 252
    INSD = 253
    INSERTPS = 254
    INSW = 255
    INT = 256
    INT3 = 257
    INTO = 258
    INVD = 259
    INVEPT = 260
    INVLPG = 261
    INVPCID = 262
    INVVPID = 263
    IRET = 264
    IRETD = 265
    IRETQ = 266
    IRETW = 267
    JA = 268
    JB = 269
    JBE = 270
    JC = 271
    JCXZ = 272
    JECXZ = 273
    JG = 274
    JL = 275
    JLE = 276
    JMPFar = 277
    JMPNear = 278
    JNB = 279
    JNC = 280
    JNL = 281
    JNO = 282
    JNP = 283
    JNS = 284
    JNZ = 285
    JO = 286
    JP = 287
    JRCXZ = 288
    JS = 289
    JZ = 290
    KADDB = 291
    KADDD = 292
    KADDQ = 293
    KADDW = 294
    KANDB = 295
    KANDD = 296
    KANDNB = 297
    KANDND = 298
    KANDNQ = 299
    KANDNW = 300
    KANDQ = 301
    KANDW = 302
    KMOVB = 303
    KMOVD = 304
    KMOVQ = 305
    KMOVW = 306
    KNOTB = 307
    KNOTD = 308
    KNOTQ = 309
    KNOTW = 310
    KORB = 311
    KORD = 312
    KORQ = 313
    KORTESTB = 314
    KORTESTD = 315
    KORTESTQ = 316
    KORTESTW = 317
    KORW = 318
    KSHIFTLB = 319
    KSHIFTLD = 320
    KSHIFTLQ = 321
    KSHIFTLW = 322
    KSHIFTRB = 323
    KSHIFTRD = 324
    KSHIFTRQ = 325
    KSHIFTRW = 326
    KTESTB = 327
    KTESTD = 328
    KTESTQ = 329
    KTESTW = 330
    KUNPCKBW = 331
    KUNPCKDQ = 332
    KUNPCKWD = 333
    KXNORB = 334
    KXNORD = 335
    KXNORQ = 336
    KXNORW = 337
    KXORB = 338
    KXORD = 339
    KXORQ = 340
    KXORW = 341
    LAHF = 342
    LAR = 343
    LDDQU = 344
    LDMXCSR = 345
    LDS = 346
    LEA = 347
    LEAVE = 348
    LES = 349
    LFENCE = 350
    LFS = 351
    LGDT = 352
    LGS = 353
    LIDT = 354
    LLDT = 355
    LMSW = 356
    LOCK = 357
    LODSB = 358
    LODSD = 359
    LODSQ = 360
    LODSW = 361
    LOOP = 362
    LOOPE = 363
    LOOPNE = 364
    LSL = 365
    LSS = 366
    LTR = 367
    LZCNT = 368
    MASKMOVDQU = 369
    MASKMOVQ = 370
    MAXPD = 371
    MAXPS = 372
    MAXSD = 373
    MAXSS = 374
    MFENCE = 375
    MINPD = 376
    MINPS = 377
    MINSD = 378
    MINSS = 379
    MONITOR = 380
    MOV = 381
    MOVAPD = 382
    MOVAPS = 383
    MOVBE = 384
    MOVD = 385
    MOVDDUP = 386
    MOVDQ2Q = 387
    MOVDQA = 388
    MOVDQU = 389
    MOVHLPS = 390
    MOVHPD = 391
    MOVHPS = 392
    MOVLHPS = 393
    MOVLPD = 394
    MOVLPS = 395
    MOVMSKPD = 396
    MOVMSKPS = 397
    MOVNTDQ = 398
    MOVNTDQA = 399
    MOVNTI = 400
    MOVNTPD = 401
    MOVNTPS = 402
    MOVNTQ = 403
    MOVQ = 404
    MOVQ2DQ = 405
    MOVSB = 406
    MOVSD = 407
    MOVSHDUP = 408
    MOVSLDUP = 409
    MOVSQ = 410
    MOVSS = 411
    MOVSW = 412
    MOVSX = 413
    MOVSXD = 414
    MOVUPD = 415
    MOVUPS = 416
    MOVZX = 417
    MPSADBW = 418
    MUL = 419
    MULPD = 420
    MULPS = 421
    MULSD = 422
    MULSS = 423
    MULX = 424
    MWAIT = 425
    NEG = 426
    NOP = 427
    NOT = 428
    OR = 429
    ORPD = 430
    ORPS = 431
    OUT = 432
    OUTS = 433
    OUTSB = 434
    OUTSD = 435
    OUTSW = 436
    PABSB = 437
    PABSD = 438
    PABSW = 439
    PACKSSDW = 440
    PACKSSWB = 441
    PACKUSDW = 442
    PACKUSWB = 443
    PADDB = 444
    PADDD = 445
    PADDQ = 446
    PADDSB = 447
    PADDSW = 448
    PADDUSB = 449
    PADDUSW = 450
    PADDW = 451
    PALIGNR = 452
    PAND = 453
    PANDN = 454
    PAUSE = 455
    PAVGB = 456
    PAVGW = 457
    PBLENDVB = 458
    PBLENDW = 459
    PCLMULQDQ = 460
    PCMPEQB = 461
    PCMPEQD = 462
    PCMPEQQ = 463
    PCMPEQW = 464
    PCMPESTRI = 465
    PCMPESTRM = 466
    PCMPGTB = 467
    PCMPGTD = 468
    PCMPGTQ = 469
    PCMPGTW = 470
    PCMPISTRI = 471
    PCMPISTRM = 472
    PDEP = 473
    PEXT = 474
    PEXTRB = 475
    PEXTRD = 476
    PEXTRQ = 477
    PEXTRW = 478
    PHADDD = 479
    PHADDSW = 480
    PHADDW = 481
    PHMINPOSUW = 482
    PHSUBD = 483
    PHSUBSW = 484
    PHSUBW = 485
    PINSRB = 486
    PINSRD = 487
    PINSRQ = 488
    PINSRW = 489
    PMADDUBSW = 490
    PMADDWD = 491
    PMAXSB = 492
    PMAXSD = 493
    PMAXSW = 494
    PMAXUB = 495
    PMAXUD = 496
    PMAXUW = 497
    PMINSB = 498
    PMINSD = 499
    PMINSW = 500
    PMINUB = 501
    PMINUD = 502
    PMINUW = 503
    PMOVMSKB = 504
    PMOVSXBD = 505
    PMOVSXBQ = 506
    PMOVSXBW = 507
    PMOVSXDQ = 508
    PMOVSXWD = 509
    PMOVSXWQ = 510
    PMOVZXBD = 511
    PMOVZXBQ = 512
    PMOVZXBW = 513
    PMOVZXDQ = 514
    PMOVZXWD = 515
    PMOVZXWQ = 516
    PMULDQ = 517
    PMULHRSW = 518
    PMULHUW = 519
    PMULHW = 520
    PMULLD = 521
    PMULLW = 522
    PMULUDQ = 523
    POP = 524
    POPA = 525
    POPAD = 526
    POPCNT = 527
    POPF = 528
    POPFD = 529
    POPFQ = 530
    POR = 531
    PREFETCHNTA = 532
    PREFETCHT0 = 533
    PREFETCHT1 = 534
    PREFETCHT2 = 535
    PREFETCHW = 536
    PREFETCHWT1 = 537
    PSADBW = 538
    PSHUFB = 539
    PSHUFD = 540
    PSHUFHW = 541
    PSHUFLW = 542
    PSHUFW = 543
    PSIGNB = 544
    PSIGND = 545
    PSIGNW = 546
    PSLLD = 547
    PSLLDQ = 548
    PSLLQ = 549
    PSLLW = 550
    PSRAD = 551
    PSRAW = 552
    PSRLD = 553
    PSRLDQ = 554
    PSRLQ = 555
    PSRLW = 556
    PSUBB = 557
    PSUBD = 558
    PSUBQ = 559
    PSUBSB = 560
    PSUBSW = 561
    PSUBUSB = 562
    PSUBUSW = 563
    PSUBW = 564
    PTEST = 565
    PUNPCKHBW = 566
    PUNPCKHDQ = 567
    PUNPCKHQDQ = 568
    PUNPCKHWD = 569
    PUNPCKLBW = 570
    PUNPCKLDQ = 571
    PUNPCKLQDQ = 572
    PUNPCKLWD = 573
    PUSH = 574
    PUSHA = 575
    PUSHAD = 576
    PUSHF = 577
    PUSHFD = 578
    PUSHFQ = 579
    PXOR = 580
    RCL = 581
    RCPPS = 582
    RCPSS = 583
    RCR = 584
    RDFSBASE = 585
    RDGSBASE = 586
    RDMSR = 587
    RDPKRU = 588
    RDPMC = 589
    RDRAND = 590
    RDSEED = 591
    RDSSP = 592
    RDTSC = 593
    RDTSCP = 594
    REP = 595
    REPE = 596
    REPNE = 597
    REPNZ = 598
    REPZ = 599
    RETFar = 600
    RETFarImm = 601
    RETNear = 602
    RETNearImm = 603
    ROL = 604
    ROR = 605
    RORX = 606
    ROUNDPD = 607
    ROUNDPS = 608
    ROUNDSD = 609
    ROUNDSS = 610
    RSM = 611
    RSQRTPS = 612
    RSQRTSS = 613
    RSTORSSP = 614
    SAHF = 615
    SAR = 616
    SARX = 617
    SAVEPREVSSP = 618
    SBB = 619
    SCASB = 620
    SCASD = 621
    SCASQ = 622
    SCASW = 623
    SETA = 624
    SETB = 625
    SETBE = 626
    SETG = 627
    SETL = 628
    SETLE = 629
    SETNB = 630
    SETNL = 631
    SETNO = 632
    SETNP = 633
    SETNS = 634
    SETNZ = 635
    SETO = 636
    SETP = 637
    SETS = 638
    SETSSBSY = 639
    SETZ = 640
    SFENCE = 641
    SGDT = 642
    SHA1MSG1 = 643
    SHA1MSG2 = 644
    SHA1NEXTE = 645
    SHA1RNDS4 = 646
    SHA256MSG1 = 647
    SHA256MSG2 = 648
    SHA256RNDS2 = 649
    SHL = 650
    SHLD = 651
    SHLX = 652
    SHR = 653
    SHRD = 654
    SHRX = 655
    SHUFPD = 656
    SHUFPS = 657
    SIDT = 658
    SLDT = 659
    SMSW = 660
    SQRTPD = 661
    SQRTPS = 662
    SQRTSD = 663
    SQRTSS = 664
    STAC = 665
    STC = 666
    STD = 667
    STI = 668
    STMXCSR = 669
    STOSB = 670
    STOSD = 671
    STOSQ = 672
    STOSW = 673
    STR = 674
    SUB = 675
    SUBPD = 676
    SUBPS = 677
    SUBSD = 678
    SUBSS = 679
    SWAPGS = 680
    SYSCALL = 681
    SYSENTER = 682
    SYSEXIT = 683
    SYSRET = 684
    TEST = 685
    TZCNT = 686
    UCOMISD = 687
    UCOMISS = 688
    UD = 689
    UD2 = 690
    UNPCKHPD = 691
    UNPCKHPS = 692
    UNPCKLPD = 693
    UNPCKLPS = 694
    VADDPD = 695
    VADDPS = 696
    VADDSD = 697
    VADDSS = 698
    VALIGND = 699
    VALIGNQ = 700
    VANDNPD = 701
    VANDNPS = 702
    VANDPD = 703
    VANDPS = 704
    VBLENDMPD = 705
    VBLENDMPS = 706
    VBROADCASTI128 = 707
    VBROADCASTSS = 708
    VCOMISD = 709
    VCOMISS = 710
    VCOMPRESSPD = 711
    VCOMPRESSPS = 712
    VCVTPD2QQ = 713
    VCVTPD2UDQ = 714
    VCVTPD2UQQ = 715
    VCVTPH2PS = 716
    VCVTPS2PH = 717
    VCVTPS2QQ = 718
    VCVTPS2UDQ = 719
    VCVTPS2UQQ = 720
    VCVTQQ2PD = 721
    VCVTQQ2PS = 722
    VCVTSD2SI = 723
    VCVTSD2USI = 724
    VCVTSI2SD = 725
    VCVTSI2SS = 726
    VCVTSS2SI = 727
    VCVTSS2USI = 728
    VCVTTPD2QQ = 729
    VCVTTPD2UDQ = 730
    VCVTTPD2UQQ = 731
    VCVTTPS2QQ = 732
    VCVTTPS2UDQ = 733
    VCVTTPS2UQQ = 734
    VCVTTSD2SI = 735
    VCVTTSD2USI = 736
    VCVTTSS2SI = 737
    VCVTTSS2USI = 738
    VCVTUDQ2PD = 739
    VCVTUDQ2PS = 740
    VCVTUQQ2PD = 741
    VCVTUQQ2PS = 742
    VCVTUSI2USD = 743
    VCVTUSI2USS = 744
    VDBPSADBW = 745
    VDIVPD = 746
    VDIVPS = 747
    VDIVSD = 748
    VDIVSS = 749
    VERR = 750
    VERW = 751
    VEXP2PD = 752
    VEXP2PS = 753
    VEXP2SD = 754
    VEXP2SS = 755
    VEXPANDPD = 756
    VEXPANDPS = 757
    VEXTRACTF32X4 = 758
    VEXTRACTF64X2 = 759
    VEXTRACTF64X4 = 760
    VEXTRACTI32X4 = 761
    VEXTRACTI64X2 = 762
    VEXTRACTI64X4 = 763
    VFIXUPIMMPD = 764
    VFIXUPIMMPS = 765
    VFIXUPIMMSD = 766
    VFIXUPIMMSS = 767
    VFPCLASSPD = 768
    VFPCLASSPS = 769
    VFPCLASSSD = 770
    VFPCLASSSS = 771
    VGETEXPPD = 772
    VGETEXPPS = 773
    VGETEXPSD = 774
    VGETEXPSS = 775
    VGETMANTPD = 776
    VGETMANTPS = 777
    VGETMANTSD = 778
    VGETMANTSS = 779
    VINSERTF32X4 = 780
    VINSERTF64X2 = 781
    VINSERTF64X4 = 782
    VINSERTI128 = 783
    VINSERTI64X2 = 784
    VLDDQU = 785
    VMCALL = 786
    VMCLEAR = 787
    VMFUNC = 788
    VMLAUNCH = 789
    VMOVAPD = 790
    VMOVAPS = 791
    VMOVD = 792
    VMOVDDUP = 793
    VMOVDQA = 794
    VMOVDQA32 = 795
    VMOVDQA64 = 796
    VMOVDQU = 797
    VMOVDQU16 = 798
    VMOVDQU32 = 799
    VMOVDQU64 = 800
    VMOVDQU8 = 801
    VMOVHLPS = 802
    VMOVHPD = 803
    VMOVHPS = 804
    VMOVLHPS = 805
    VMOVLPD = 806
    VMOVLPS = 807
    VMOVMSKPD = 808
    VMOVMSKPS = 809
    VMOVNTDQ = 810
    VMOVNTPD = 811
    VMOVNTPS = 812
    VMOVQ = 813
    VMOVSD = 814
    VMOVSHDUP = 815
    VMOVSLDUP = 816
    VMOVSS = 817
    VMOVUPD = 818
    VMOVUPS = 819
    VMPTRLD = 820
    VMPTRST = 821
    VMREAD = 822
    VMRESUME = 823
    VMULPD = 824
    VMULPS = 825
    VMULSD = 826
    VMULSS = 827
    VMWRITE = 828
    VMXOFF = 829
    VMXON = 830
    VORPD = 831
    VORPS = 832
    VPABSB = 833
    VPABSD = 834
    VPABSW = 835
    VPACKSSDW = 836
    VPACKSSWB = 837
    VPACKUSDW = 838
    VPACKUSWB = 839
    VPADDB = 840
    VPADDD = 841
    VPADDQ = 842
    VPADDSB = 843
    VPADDSW = 844
    VPADDUSB = 845
    VPADDUSW = 846
    VPADDW = 847
    VPALIGNR = 848
    VPAND = 849
    VPANDN = 850
    VPAVGB = 851
    VPAVGW = 852
    VPBLENDMB = 853
    VPBLENDMD = 854
    VPBLENDMQ = 855
    VPBLENDMW = 856
    VPBROADCASTB = 857
    VPBROADCASTD = 858
    VPBROADCASTM = 859
    VPBROADCASTQ = 860
    VPBROADCASTW = 861
    VPCMPB = 862
    VPCMPD = 863
    VPCMPEQB = 864
    VPCMPEQD = 865
    VPCMPEQQ = 866
    VPCMPEQW = 867
    VPCMPESTRI = 868
    VPCMPESTRM = 869
    VPCMPGTB = 870
    VPCMPGTD = 871
    VPCMPGTQ = 872
    VPCMPGTW = 873
    VPCMPISTRI = 874
    VPCMPISTRM = 875
    VPCMPQ = 876
    VPCMPW = 877
    VPCMUB = 878
    VPCMUD = 879
    VPCMUQ = 880
    VPCMUW = 881
    VPCOMPRESSD = 882
    VPCOMPRESSQ = 883
    VPCONFLICTD = 884
    VPCONFLICTQ = 885
    VPERMI2B = 886
    VPERMI2D = 887
    VPERMI2PD = 888
    VPERMI2PS = 889
    VPERMI2Q = 890
    VPERMI2W = 891
    VPERMT2D = 892
    VPERMT2PD = 893
    VPERMT2PS = 894
    VPERMT2Q = 895
    VPERMW = 896
    VPEXPANDD = 897
    VPEXPANDQ = 898
    VPEXTRW = 899
    VPHADDD = 900
    VPHADDSW = 901
    VPHADDW = 902
    VPHMINPOSUW = 903
    VPHSUBD = 904
    VPHSUBSW = 905
    VPHSUBW = 906
    VPINSRB = 907
    VPINSRW = 908
    VPLZCNTD = 909
    VPLZCNTQ = 910
    VPMADDWD = 911
    VPMAXSB = 912
    VPMAXSD = 913
    VPMAXSQ = 914
    VPMAXSW = 915
    VPMAXUB = 916
    VPMAXUD = 917
    VPMAXUQ = 918
    VPMAXUW = 919
    VPMINSB = 920
    VPMINSD = 921
    VPMINSQ = 922
    VPMINSW = 923
    VPMINUB = 924
    VPMINUD = 925
    VPMINUQ = 926
    VPMINUW = 927
    VPMOVB2D = 928
    VPMOVB2M = 929
    VPMOVDB = 930
    VPMOVDW = 931
    VPMOVM2B = 932
    VPMOVM2D = 933
    VPMOVM2Q = 934
    VPMOVM2W = 935
    VPMOVMSKB = 936
    VPMOVQ2M = 937
    VPMOVQB = 938
    VPMOVQD = 939
    VPMOVQW = 940
    VPMOVSDB = 941
    VPMOVSDW = 942
    VPMOVSQB = 943
    VPMOVSQD = 944
    VPMOVSQW = 945
    VPMOVSWB = 946
    VPMOVSXBD = 947
    VPMOVSXBQ = 948
    VPMOVSXBW = 949
    VPMOVSXDQ = 950
    VPMOVSXWD = 951
    VPMOVSXWQ = 952
    VPMOVUSDB = 953
    VPMOVUSDW = 954
    VPMOVUSQB = 955
    VPMOVUSQD = 956
    VPMOVUSQW = 957
    VPMOVUSWB = 958
    VPMOVW2M = 959
    VPMOVWB = 960
    VPMOVZXBD = 961
    VPMOVZXBQ = 962
    VPMOVZXBW = 963
    VPMOVZXDQ = 964
    VPMOVZXWD = 965
    VPMOVZXWQ = 966
    VPMULDQ = 967
    VPMULHRSW = 968
    VPMULHUW = 969
    VPMULHW = 970
    VPMULLD = 971
    VPMULLQ = 972
    VPMULLW = 973
    VPMULUDQ = 974
    VPOR = 975
    VPROLD = 976
    VPROLQ = 977
    VPROLVD = 978
    VPROLVQ = 979
    VPRORD = 980
    VPRORQ = 981
    VPRORRD = 982
    VPRORRQ = 983
    VPSADBW = 984
    VPSCATTERDD = 985
    VPSCATTERDQ = 986
    VPSCATTERQD = 987
    VPSCATTERQQ = 988
    VPSHUFB = 989
    VPSHUFD = 990
    VPSHUFHW = 991
    VPSHUFLW = 992
    VPSIGNB = 993
    VPSIGND = 994
    VPSIGNW = 995
    VPSLLD = 996
    VPSLLDQ = 997
    VPSLLQ = 998
    VPSLLVW = 999
    VPSLLW = 1000
    VPSRAD = 1001
    VPSRAQ = 1002
    VPSRAVQ = 1003
    VPSRAVW = 1004
    VPSRAW = 1005
    VPSRLD = 1006
    VPSRLDQ = 1007
    VPSRLQ = 1008
    VPSRLVW = 1009
    VPSRLW = 1010
    VPSUBB = 1011
    VPSUBD = 1012
    VPSUBQ = 1013
    VPSUBSB = 1014
    VPSUBSW = 1015
    VPSUBUSB = 1016
    VPSUBUSW = 1017
    VPSUBW = 1018
    VPTERLOGD = 1019
    VPTERLOGQ = 1020
    VPTEST = 1021
    VPTESTMB = 1022
    VPTESTMD = 1023
    VPTESTMQ = 1024
    VPTESTMW = 1025
    VPTESTNMB = 1026
    VPTESTNMD = 1027
    VPTESTNMQ = 1028
    VPTESTNMW = 1029
    VPUNPCKHBW = 1030
    VPUNPCKHDQ = 1031
    VPUNPCKHQDQ = 1032
    VPUNPCKHWD = 1033
    VPUNPCKLBW = 1034
    VPUNPCKLDQ = 1035
    VPUNPCKLQDQ = 1036
    VPUNPCKLWD = 1037
    VPXOR = 1038
    VRANGEPD = 1039
    VRANGEPS = 1040
    VRANGESD = 1041
    VRANGESS = 1042
    VRCP14PD = 1043
    VRCP14PS = 1044
    VRCP14SD = 1045
    VRCP14SS = 1046
    VRCP28PD = 1047
    VRCP28PS = 1048
    VRCP28SD = 1049
    VRCP28SS = 1050
    VREDUCEPD = 1051
    VREDUCEPS = 1052
    VREDUCESD = 1053
    VREDUCESS = 1054
    VRNDSCALEPD = 1055
    VRNDSCALEPS = 1056
    VRNDSCALESD = 1057
    VRNDSCALESS = 1058
    VRSQRT14PD = 1059
    VRSQRT14PS = 1060
    VRSQRT14SD = 1061
    VRSQRT14SS = 1062
    VRSQRT28PD = 1063
    VRSQRT28PS = 1064
    VRSQRT28SD = 1065
    VRSQRT28SS = 1066
    VSCALEPD = 1067
    VSCALEPS = 1068
    VSCALESD = 1069
    VSCALESS = 1070
    VSCATTERDD = 1071
    VSCATTERDQ = 1072
    VSCATTERQD = 1073
    VSCATTERQQ = 1074
    VSHUFF32X4 = 1075
    VSHUFF64X2 = 1076
    VSHUFI32X4 = 1077
    VSHUFI64X2 = 1078
    VSHUFPD = 1079
    VSHUFPS = 1080
    VSQRTPD = 1081
    VSQRTPS = 1082
    VSQRTSD = 1083
    VSQRTSS = 1084
    VSUBPD = 1085
    VSUBPS = 1086
    VSUBSD = 1087
    VSUBSS = 1088
    VUCOMISD = 1089
    VUCOMISS = 1090
    VUNPCKHPD = 1091
    VUNPCKHPS = 1092
    VUNPCKLPD = 1093
    VUNPCKLPS = 1094
    VXORPD = 1095
    VXORPS = 1096
    VZEROUPPER = 1097
    WAIT = 1098
    WBINVD = 1099
    WRFSBASE = 1100
    WRGSBASE = 1101
    WRMSR = 1102
    WRPKRU = 1103
    WRSS = 1104
    WRUSS = 1105
    XABORT = 1106
    XACQUIRE = 1107
    XADD = 1108
    XBEGIN = 1109
    XCHG = 1110
    XEND = 1111
    XGETBV = 1112
    XLAT = 1113
    XLATB = 1114
    XOR = 1115
    XORPD = 1116
    XORPS = 1117
    XRELEASE = 1118
    XRSTOR = 1119
    XRSTORS = 1120
    XRSTORS64 = 1121
    XSAVE = 1122
    XSAVEC = 1123
    XSAVEC64 = 1124
    XSAVEOPT = 1125
    XSAVES = 1126
    XSAVES64 = 1127
    XSETBV = 1128
    XTEST = 1129
    InvalOP = 1130
    # AVX, FMA and AVX-512 forms numbered after the sentinel
    VADDSUBPD = 1131
    VADDSUBPS = 1132
    VAESDEC = 1133
    VAESDECLAST = 1134
    VAESENC = 1135
    VAESENCLAST = 1136
    VAESIMC = 1137
    VAESKEYGENASSIST = 1138
    VBLENDPD = 1139
    VBLENDPS = 1140
    VBLENDVPD = 1141
    VBLENDVPS = 1142
    VBROADCASTF128 = 1143
    VBROADCASTSD = 1144
    VCMPPD = 1145
    VCMPPS = 1146
    VCMPSD = 1147
    VCMPSS = 1148
    VCVTDQ2PD = 1149
    VCVTDQ2PS = 1150
    VCVTPD2DQ = 1151
    VCVTPD2PS = 1152
    VCVTPS2DQ = 1153
    VCVTPS2PD = 1154
    VCVTSD2SS = 1155
    VCVTSS2SD = 1156
    VCVTTPD2DQ = 1157
    VCVTTPS2DQ = 1158
    VDPPD = 1159
    VDPPS = 1160
    VEXTRACTF128 = 1161
    VEXTRACTF32X8 = 1162
    VEXTRACTI128 = 1163
    VEXTRACTI32X8 = 1164
    VEXTRACTPS = 1165
    VFMADD132PD = 1166
    VFMADD132PS = 1167
    VFMADD132SD = 1168
    VFMADD132SS = 1169
    VFMADD213PD = 1170
    VFMADD213PS = 1171
    VFMADD213SD = 1172
    VFMADD213SS = 1173
    VFMADD231PD = 1174
    VFMADD231PS = 1175
    VFMADD231SD = 1176
    VFMADD231SS = 1177
    VFMADDSUB132PD = 1178
    VFMADDSUB132PS = 1179
    VFMADDSUB213PD = 1180
    VFMADDSUB213PS = 1181
    VFMADDSUB231PD = 1182
    VFMADDSUB231PS = 1183
    VFMSUB132PD = 1184
    VFMSUB132PS = 1185
    VFMSUB132SD = 1186
    VFMSUB132SS = 1187
    VFMSUB213PD = 1188
    VFMSUB213PS = 1189
    VFMSUB213SD = 1190
    VFMSUB213SS = 1191
    VFMSUB231PD = 1192
    VFMSUB231PS = 1193
    VFMSUB231SD = 1194
    VFMSUB231SS = 1195
    VFMSUBADD132PD = 1196
    VFMSUBADD132PS = 1197
    VFMSUBADD213PD = 1198
    VFMSUBADD213PS = 1199
    VFMSUBADD231PD = 1200
    VFMSUBADD231PS = 1201
    VFNMADD132PD = 1202
    VFNMADD132PS = 1203
    VFNMADD132SD = 1204
    VFNMADD132SS = 1205
    VFNMADD213PD = 1206
    VFNMADD213PS = 1207
    VFNMADD213SD = 1208
    VFNMADD213SS = 1209
    VFNMADD231PD = 1210
    VFNMADD231PS = 1211
    VFNMADD231SD = 1212
    VFNMADD231SS = 1213
    VFNMSUB132PD = 1214
    VFNMSUB132PS = 1215
    VFNMSUB132SD = 1216
    VFNMSUB132SS = 1217
    VFNMSUB213PD = 1218
    VFNMSUB213PS = 1219
    VFNMSUB213SD = 1220
    VFNMSUB213SS = 1221
    VFNMSUB231PD = 1222
    VFNMSUB231PS = 1223
    VFNMSUB231SD = 1224
    VFNMSUB231SS = 1225
    VGATHERDPD = 1226
    VGATHERDPS = 1227
    VGATHERQPD = 1228
    VGATHERQPS = 1229
    VHADDPD = 1230
    VHADDPS = 1231
    VHSUBPD = 1232
    VHSUBPS = 1233
    VINSERTF128 = 1234
    VINSERTF32X8 = 1235
    VINSERTI32X4 = 1236
    VINSERTI32X8 = 1237
    VINSERTI64X4 = 1238
    VINSERTPS = 1239
    VLDMXCSR = 1240
    VMASKMOVDQU = 1241
    VMASKMOVPD = 1242
    VMASKMOVPS = 1243
    VMAXPD = 1244
    VMAXPS = 1245
    VMAXSD = 1246
    VMAXSS = 1247
    VMINPD = 1248
    VMINPS = 1249
    VMINSD = 1250
    VMINSS = 1251
    VMOVNTDQA = 1252
    VMPSADBW = 1253
    VPABSQ = 1254
    VPANDD = 1255
    VPANDND = 1256
    VPANDNQ = 1257
    VPANDQ = 1258
    VPBLENDD = 1259
    VPBLENDVB = 1260
    VPBLENDW = 1261
    VPCLMULQDQ = 1262
    VPERM2F128 = 1263
    VPERM2I128 = 1264
    VPERMD = 1265
    VPERMILPD = 1266
    VPERMILPS = 1267
    VPERMPD = 1268
    VPERMPS = 1269
    VPERMQ = 1270
    VPEXTRB = 1271
    VPEXTRD = 1272
    VPEXTRQ = 1273
    VPGATHERDD = 1274
    VPGATHERDQ = 1275
    VPGATHERQD = 1276
    VPGATHERQQ = 1277
    VPINSRD = 1278
    VPINSRQ = 1279
    VPMADDUBSW = 1280
    VPMASKMOVD = 1281
    VPMASKMOVQ = 1282
    VPMOVD2M = 1283
    VPORD = 1284
    VPORQ = 1285
    VPSLLVD = 1286
    VPSLLVQ = 1287
    VPSRAVD = 1288
    VPSRLVD = 1289
    VPSRLVQ = 1290
    VPXORD = 1291
    VPXORQ = 1292
    VRCPPS = 1293
    VRCPSS = 1294
    VROUNDPD = 1295
    VROUNDPS = 1296
    VROUNDSD = 1297
    VROUNDSS = 1298
    VRSQRTPS = 1299
    VRSQRTSS = 1300
    VSTMXCSR = 1301
    VTESTPD = 1302
    VTESTPS = 1303
    VZEROALL = 1304


BRANCH_OPCODES = frozenset(
    {
        Opcode.JA, Opcode.JB, Opcode.JBE, Opcode.JC, Opcode.JCXZ, Opcode.JECXZ,
        Opcode.JG, Opcode.JL, Opcode.JLE, Opcode.JNB, Opcode.JNC, Opcode.JNL,
        Opcode.JNO, Opcode.JNP, Opcode.JNS, Opcode.JNZ, Opcode.JO, Opcode.JP,
        Opcode.JRCXZ, Opcode.JS, Opcode.JZ, Opcode.LOOP, Opcode.LOOPE,
        Opcode.LOOPNE, Opcode.JMPNear, Opcode.JMPFar, Opcode.XBEGIN,
    }
)
CALL_OPCODES = frozenset({Opcode.CALLNear, Opcode.CALLFar})
RETURN_OPCODES = frozenset(
    {
        Opcode.RETNear, Opcode.RETNearImm, Opcode.RETFar, Opcode.RETFarImm,
        Opcode.IRET, Opcode.IRETD, Opcode.IRETQ, Opcode.IRETW,
        Opcode.SYSRET, Opcode.SYSEXIT,
    }
)
